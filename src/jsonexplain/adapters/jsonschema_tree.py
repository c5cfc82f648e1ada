"""Build result trees from ``jsonschema`` validation errors.

``jsonschema`` reports a flat stream of errors, each anchored at an
``absolute_path`` in the document. The adapter files every error under the
branch keyword its ``absolute_schema_path`` descended through
(``properties``, ``patternProperties``, ``additionalProperties`` or
``items``) so the walker sees the same nested shape, in the same order, that
the validator produced.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from jsonschema import Draft7Validator, FormatChecker
from jsonschema.exceptions import ValidationError as SchemaValidationError
from jsonschema.validators import validator_for

from jsonexplain.config import RenderOptions
from jsonexplain.constants.keywords import (
    ADDITIONAL_PROPERTIES,
    DEPENDENCIES,
    DEPENDENT_REQUIRED,
    DESCENT_BRANCHES,
    ITEMS,
    LEAF_KEYWORD_CODES,
    NAMED_SUBSCHEMA_KEYWORDS,
    NOT,
    ONE_OF,
    PROPERTIES,
    REQUIRED,
)
from jsonexplain.exceptions import UnsupportedKeywordError
from jsonexplain.model import ErrorRecord
from jsonexplain.render import render
from jsonexplain.render.schema import undeclared_properties
from jsonexplain.types import PathSegment, ResultMapping

logger = logging.getLogger(__name__)

# ``oneOf`` errors without sub-errors mean at least two branches matched.
_SEVERAL_MATCHES: int = 2


def build_result_tree(errors: Iterable[SchemaValidationError]) -> ResultMapping | None:
    """Nest ``jsonschema`` errors into a result tree; ``None`` when there are none."""
    root: ResultMapping = {}
    for error in errors:
        steps = _branch_steps(error)
        if error.validator == REQUIRED and isinstance(error.validator_value, bool):
            # Draft 3 marks the property schema itself as required; the
            # error is anchored at the missing property.
            _, name = steps.pop()
            _add_missing(_node_at(root, steps), error.instance, [name])
            continue
        _add_failure(_node_at(root, steps), error)
    return root or None


def explain(
    schema: Any,
    document: Any,
    options: RenderOptions | Mapping[str, Any] | None = None,
) -> list[ErrorRecord]:
    """Validate ``document`` against ``schema`` and render the failures.

    The draft is picked from ``$schema``, defaulting to Draft 7. Formats are
    checked.

    Failures are rendered for the structural keywords (``properties``,
    ``patternProperties``, ``additionalProperties``, ``items``,
    ``prefixItems``, ``additionalItems``, ``required``, ``dependencies``,
    ``dependentRequired``, ``not``, ``oneOf``) and for the leaf keywords
    ``type``, ``enum``, ``const``, ``format``, ``pattern``, ``anyOf``,
    ``multipleOf``, the numeric bounds and the length, item and property
    counts. Failures inside ``allOf``, ``then``, ``else``, ``$ref`` and
    schema-valued ``dependencies`` are rendered by those same rules. Any other
    failing keyword (``contains``, ``propertyNames``, ``false`` sub-schemas,
    ...) raises ``UnsupportedKeywordError``.
    """
    validator_cls = validator_for(schema, default=Draft7Validator)
    validator = validator_cls(schema, format_checker=FormatChecker())
    tree = build_result_tree(validator.iter_errors(document))
    if tree is None:
        logger.debug("Document is valid against schema")
    return render(schema, document, tree, options)


def _branch_steps(error: SchemaValidationError) -> list[tuple[str, PathSegment]]:
    """Pair every document path step of ``error`` with the branch keyword that reached it."""
    path = list(error.absolute_path)
    branches = _descent_keywords(list(error.absolute_schema_path)[:-1])
    if len(branches) != len(path):
        logger.debug("Schema path %s does not line up with document path %s", list(error.absolute_schema_path), path)
        branches = [ITEMS if isinstance(step, int) else PROPERTIES for step in path]
    return list(zip(branches, path))


def _descent_keywords(schema_path: Sequence[Any]) -> list[str]:
    keywords: list[str] = []
    position = 0
    while position < len(schema_path):
        step = schema_path[position]
        if step in DESCENT_BRANCHES:
            keywords.append(DESCENT_BRANCHES[step])
        if step in NAMED_SUBSCHEMA_KEYWORDS or (step == ITEMS and _is_index(schema_path, position + 1)):
            position += 2
        else:
            position += 1
    return keywords


def _is_index(schema_path: Sequence[Any], position: int) -> bool:
    return position < len(schema_path) and isinstance(schema_path[position], int)


def _node_at(root: ResultMapping, steps: Iterable[tuple[str, PathSegment]]) -> ResultMapping:
    node = root
    for branch, step in steps:
        node = node.setdefault(branch, {}).setdefault(step, {})
    return node


def _add_failure(node: ResultMapping, error: SchemaValidationError) -> None:
    keyword = error.validator
    if keyword == REQUIRED:
        _add_missing(node, error.instance, error.validator_value)
    elif keyword in (DEPENDENCIES, DEPENDENT_REQUIRED):
        for name, dependency in error.validator_value.items():
            if isinstance(error.instance, Mapping) and name in error.instance and not isinstance(dependency, Mapping):
                _add_missing(node, error.instance, [dependency] if isinstance(dependency, str) else dependency)
    elif keyword == ADDITIONAL_PROPERTIES:
        names = node.setdefault(ADDITIONAL_PROPERTIES, [])
        for name in undeclared_properties(error.schema, error.instance):
            if name not in names:
                names.append(name)
    elif keyword == ONE_OF:
        node.setdefault(ONE_OF, 0 if error.context else _SEVERAL_MATCHES)
    elif keyword == NOT:
        node.setdefault(NOT, True)
    elif keyword in LEAF_KEYWORD_CODES:
        if keyword in node:
            logger.debug("Keeping first %s failure at %s", keyword, list(error.absolute_path))
            return
        node[keyword] = error.validator_value
    else:
        raise UnsupportedKeywordError(keyword)


def _add_missing(node: ResultMapping, instance: Any, names: Iterable[str]) -> None:
    missing = node.setdefault(REQUIRED, [])
    for name in names:
        if isinstance(instance, Mapping) and name not in instance and name not in missing:
            missing.append(name)
