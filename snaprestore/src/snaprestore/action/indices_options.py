"""Indices options - how missing indices and wildcard expressions are handled."""

from typing import Any

from pydantic import BaseModel, ConfigDict


def _as_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("", "true", "on", "yes", "1"):
        return True
    if text in ("false", "off", "no", "0"):
        return False
    raise ValueError(f"Failed to parse value [{value}] as boolean")


class IndicesOptions(BaseModel):
    """
    Policy for resolving index expressions.

    Attributes:
        ignore_unavailable: Skip concrete names that do not exist
        allow_no_indices: Accept wildcard expressions that match nothing
        expand_wildcards_open: Wildcards expand to open indices
        expand_wildcards_closed: Wildcards expand to closed indices
    """

    model_config = ConfigDict(frozen=True)

    ignore_unavailable: bool = False
    allow_no_indices: bool = True
    expand_wildcards_open: bool = True
    expand_wildcards_closed: bool = False

    @property
    def expands_wildcards(self) -> bool:
        return self.expand_wildcards_open or self.expand_wildcards_closed

    @classmethod
    def from_options(
        cls,
        ignore_unavailable: bool,
        allow_no_indices: bool,
        expand_wildcards_open: bool,
        expand_wildcards_closed: bool,
    ) -> "IndicesOptions":
        return cls(
            ignore_unavailable=ignore_unavailable,
            allow_no_indices=allow_no_indices,
            expand_wildcards_open=expand_wildcards_open,
            expand_wildcards_closed=expand_wildcards_closed,
        )

    @classmethod
    def strict_expand_open(cls) -> "IndicesOptions":
        """Missing names fail, empty wildcards allowed, wildcards hit open indices."""
        return cls.from_options(False, True, True, False)

    @classmethod
    def strict_expand_open_closed(cls) -> "IndicesOptions":
        return cls.from_options(False, True, True, True)

    @classmethod
    def lenient_expand_open(cls) -> "IndicesOptions":
        """Missing names are ignored, wildcards hit open indices."""
        return cls.from_options(True, True, True, False)

    @classmethod
    def from_name(cls, name: str) -> "IndicesOptions":
        """Look up one of the named presets (``lenient_expand_open``...)."""
        presets = {
            "strict_expand_open": cls.strict_expand_open,
            "strict_expand_open_closed": cls.strict_expand_open_closed,
            "lenient_expand_open": cls.lenient_expand_open,
        }
        try:
            return presets[name]()
        except KeyError as e:
            raise ValueError(f"Unknown indices options preset [{name}]") from e

    @classmethod
    def from_parameters(
        cls,
        expand_wildcards: str | list[str] | None,
        ignore_unavailable: Any,
        allow_no_indices: Any,
        default: "IndicesOptions",
    ) -> "IndicesOptions":
        """
        Build options from request parameters, falling back to ``default``.

        Args:
            expand_wildcards: ``open``, ``closed``, ``all``, ``none`` or a comma
                separated/list combination
            ignore_unavailable: Boolean or boolean-like string
            allow_no_indices: Boolean or boolean-like string
            default: Options supplying values for absent parameters
        """
        if expand_wildcards is None:
            expand_open = default.expand_wildcards_open
            expand_closed = default.expand_wildcards_closed
        else:
            if isinstance(expand_wildcards, str):
                expand_wildcards = expand_wildcards.split(",")
            expand_open = expand_closed = False
            for wildcard in (w.strip() for w in expand_wildcards):
                if wildcard == "open":
                    expand_open = True
                elif wildcard == "closed":
                    expand_closed = True
                elif wildcard == "all":
                    expand_open = expand_closed = True
                elif wildcard != "none":
                    raise ValueError(f"No valid expand wildcard value [{wildcard}]")

        return cls.from_options(
            _as_bool(ignore_unavailable, default.ignore_unavailable),
            _as_bool(allow_no_indices, default.allow_no_indices),
            expand_open,
            expand_closed,
        )

    def expand_wildcards_names(self) -> list[str]:
        names = []
        if self.expand_wildcards_open:
            names.append("open")
        if self.expand_wildcards_closed:
            names.append("closed")
        return names or ["none"]
