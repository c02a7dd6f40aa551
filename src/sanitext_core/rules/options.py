"""
Typed build options for each value shape.

Turns the raw parameter map produced by parse_rule() into frozen Pydantic
models. Bound values are parsed as positive decimal integers, flags become
booleans, and every problem is reported as a ConfigError before any value
is validated.

Copyright (c) 2025 Goncharenko Anton aka alienxs2
License: MIT
"""

from typing import Any, ClassVar, Dict, FrozenSet, List, Literal, Mapping, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, PositiveInt, field_validator
from pydantic import ValidationError as PydanticValidationError

from sanitext_core.exceptions import ConfigError
from sanitext_core.utils.logger_factory import get_logger

logger = get_logger(__name__)

UnicodeForm = Literal["nfc", "nfd", "nfkc", "nfkd"]

OptionsT = TypeVar("OptionsT", bound="RuleOptions")


class RuleOptions(BaseModel):
    """
    Options shared by every shape: length (text) or count (list, map) bounds.

    Subclasses declare which rule parameters they accept in PARAMS
    (parameter name -> field name) and which of those are boolean flags.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    min: Optional[PositiveInt] = None
    max: Optional[PositiveInt] = None

    PARAMS: ClassVar[Dict[str, str]] = {"min": "min", "max": "max"}
    FLAGS: ClassVar[FrozenSet[str]] = frozenset()
    SHAPE: ClassVar[str] = ""

    @classmethod
    def from_params(
        cls: "type[OptionsT]", params: Mapping[str, str], strict: bool = False
    ) -> OptionsT:
        """
        Build options from a parsed parameter map.

        A flag is enabled by its presence; any value attached to it is
        ignored. A non-flag parameter with an empty value counts as absent.

        Args:
            params: Output of parse_rule()
            strict: Raise on parameters unknown to this shape instead of
                ignoring them

        Returns:
            Validated options instance

        Raises:
            ConfigError: CFG_001 for an invalid value, CFG_002 when max is
                smaller than min, CFG_003 for an unknown parameter in
                strict mode
        """
        data: Dict[str, Any] = {}
        unknown: List[str] = []

        for name, value in params.items():
            field_name = cls.PARAMS.get(name)
            if field_name is None:
                unknown.append(name)
            elif name in cls.FLAGS:
                data[field_name] = True
            elif value != "":
                data[field_name] = value

        if unknown:
            if strict:
                raise ConfigError(
                    f"unknown parameter(s) for {cls.SHAPE} rule: {', '.join(sorted(unknown))}",
                    error_code="CFG_003",
                    details={"parameters": sorted(unknown), "shape": cls.SHAPE},
                )
            logger.warning("unknown_rule_parameters_ignored", shape=cls.SHAPE, parameters=unknown)

        try:
            options = cls(**data)
        except PydanticValidationError as e:
            field_to_param = {field: param for param, field in cls.PARAMS.items()}
            problems = []
            for err in e.errors():
                field_name = str(err["loc"][0]) if err["loc"] else ""
                problems.append(
                    {"parameter": field_to_param.get(field_name, field_name), "reason": err["msg"]}
                )
            message = "; ".join(
                f"parameter '{p['parameter']}' is invalid: {p['reason']}" for p in problems
            )
            raise ConfigError(
                message,
                error_code="CFG_001",
                details={"shape": cls.SHAPE, "problems": problems},
                original_exception=e,
            ) from e

        if options.min is not None and options.max is not None and options.min > options.max:
            raise ConfigError(
                "parameter 'max' must not be smaller than parameter 'min'",
                error_code="CFG_002",
                details={"shape": cls.SHAPE, "min": options.min, "max": options.max},
            )

        return options


class TextRuleOptions(RuleOptions):
    """Options for the string sanitizer (bounds are UTF-8 byte lengths)."""

    preserve_whitespace: bool = False
    preserve_newlines: bool = False
    replace_whitespaces: bool = False
    ascii_only: bool = False
    unorm: UnicodeForm = "nfc"

    PARAMS: ClassVar[Dict[str, str]] = {
        "min": "min",
        "max": "max",
        "preserve-whitespace": "preserve_whitespace",
        "preserve-newlines": "preserve_newlines",
        "replace-whitespaces": "replace_whitespaces",
        "asciionly": "ascii_only",
        "unorm": "unorm",
    }
    FLAGS: ClassVar[FrozenSet[str]] = frozenset(
        {"preserve-whitespace", "preserve-newlines", "replace-whitespaces", "asciionly"}
    )
    SHAPE: ClassVar[str] = "text"

    @field_validator("unorm", mode="before")
    @classmethod
    def lower_unorm(cls, v: Any) -> Any:
        """Accept normalization form names in any case."""
        if isinstance(v, str):
            return v.lower()
        return v

    @property
    def unicode_form(self) -> str:
        """Form name as accepted by unicodedata.normalize()."""
        return self.unorm.upper()


class ListRuleOptions(RuleOptions):
    """Options for list-of-text validators (bounds are element counts)."""

    sort: bool = False
    unique: bool = False
    value: str = ""

    PARAMS: ClassVar[Dict[str, str]] = {
        "min": "min",
        "max": "max",
        "sort": "sort",
        "unique": "unique",
        "value": "value",
    }
    FLAGS: ClassVar[FrozenSet[str]] = frozenset({"sort", "unique"})
    SHAPE: ClassVar[str] = "list"


class MapRuleOptions(RuleOptions):
    """Options for map-of-text validators (bounds are entry counts)."""

    key: str = ""
    value: str = ""

    PARAMS: ClassVar[Dict[str, str]] = {
        "min": "min",
        "max": "max",
        "key": "key",
        "value": "value",
    }
    SHAPE: ClassVar[str] = "map"
