import copy
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .config import settings
from .errors import ApplicationError, ResponseDecodeError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

MAX_DECODE_PASSES = 10

Location = Sequence[Union[str, int]]


def _locate(data: Any, loc: Location) -> Optional[Tuple[Any, Union[str, int]]]:
    """
    Follow an error location through the raw body and return the innermost
    (container, key) pair it reaches. Segments with no counterpart in the
    body are skipped: union member names, and wrapper keys added by
    before-validators.
    """
    target = None
    node = data
    for part in loc:
        if isinstance(node, dict) and isinstance(part, str) and part in node:
            target = (node, part)
        elif isinstance(node, list) and isinstance(part, int) and 0 <= part < len(node):
            target = (node, part)
        else:
            continue
        node = node[part]
    return target


def _prune(data: Dict[str, Any], errors: List[Dict[str, Any]]) -> List[Location]:
    """Remove every value the errors point at; returns the locations that removed something"""
    dropped: List[Location] = []
    # List members are removed after the pass so the remaining indexes stay valid
    removals: Dict[int, Tuple[list, set]] = {}

    for err in errors:
        target = _locate(data, err["loc"])
        if target is None:
            continue
        container, key = target
        if isinstance(container, dict):
            del container[key]
        else:
            removals.setdefault(id(container), (container, set()))[1].add(key)
        dropped.append(err["loc"])

    for container, indexes in removals.values():
        for index in sorted(indexes, reverse=True):
            del container[index]

    return dropped


def decode(model: Type[ModelT], body: Any) -> ModelT:
    """
    Decode a response body into a result model.

    Decoding is permissive: values that do not fit the model are dropped and
    decoding is retried, so a malformed field never hides the rest of the
    response. With STRICT_DECODE the first mismatch raises instead.
    """
    if not isinstance(body, dict):
        if settings.STRICT_DECODE:
            raise ResponseDecodeError(f"expected a JSON object, got {type(body).__name__}")
        body = {}

    data = copy.deepcopy(body)
    for _ in range(MAX_DECODE_PASSES):
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            if settings.STRICT_DECODE:
                raise ResponseDecodeError(f"response does not match {model.__name__}: {e}") from e
            dropped = _prune(data, e.errors())
            if not dropped:
                break
            logger.warning("Ignoring malformed fields in %s: %s", model.__name__, dropped)

    logger.warning("Could not decode %s after removing malformed fields, returning an empty result", model.__name__)
    return model()


def raise_for_error(result: ModelT) -> ModelT:
    """Raise ApplicationError when the result carries a non-empty error message"""
    error = getattr(result, "error", None)
    if error is not None and error.message:
        raise ApplicationError(error.code, error.message, result)
    return result


def normalize(model: Type[ModelT], body: Any) -> ModelT:
    return raise_for_error(decode(model, body))
