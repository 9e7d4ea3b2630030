"""Per-rule lint configuration."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
import logging
from pathlib import Path
from types import MappingProxyType
import tomllib

from essbaselint.diagnostics import SEVERITIES, Severity

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read or decoded."""


@dataclass(frozen=True, slots=True)
class RuleOptions:
    """Toggle and severity override for one rule; `severity=None` keeps the rule default."""

    enabled: bool = True
    severity: Severity | None = None

    @staticmethod
    def from_raw(rule_id: str, raw: object) -> "RuleOptions":
        """Decode one configuration entry, falling back to defaults for anything malformed."""
        if isinstance(raw, bool):
            return RuleOptions(enabled=raw)
        if isinstance(raw, str):
            return RuleOptions(severity=_decode_severity(rule_id, raw))
        if not isinstance(raw, Mapping):
            logger.warning("Ignoring configuration for rule `%s`: expected a table, got %r", rule_id, raw)
            return RuleOptions()

        enabled = raw.get("enabled", True)
        if not isinstance(enabled, bool):
            logger.warning("Ignoring `enabled=%r` for rule `%s`: expected true/false", enabled, rule_id)
            enabled = True

        severity = raw.get("severity")
        return RuleOptions(
            enabled=enabled,
            severity=_decode_severity(rule_id, severity) if severity is not None else None,
        )


DEFAULT_RULE_OPTIONS = RuleOptions()


@dataclass(frozen=True, slots=True)
class LintConfig:
    """Rule id -> options. Rules without an entry run enabled with their default severity."""

    rules: Mapping[str, RuleOptions] = field(default_factory=lambda: MappingProxyType({}))

    def options_for(self, rule_id: str) -> RuleOptions:
        return self.rules.get(rule_id, DEFAULT_RULE_OPTIONS)

    @staticmethod
    def from_mapping(raw: Mapping[str, object], *, known_rules: Iterable[str] | None = None) -> "LintConfig":
        """Build a config from decoded JSON/TOML, e.g. `{"commaPlacement": {"severity": "error"}}`."""
        if known_rules is None:
            from essbaselint.lint.rules import default_lint_rules

            known_rules = [rule.id for rule in default_lint_rules()]
        known = frozenset(known_rules)

        rules: dict[str, RuleOptions] = {}
        for rule_id, entry in raw.items():
            if rule_id not in known:
                logger.warning("Ignoring configuration for unknown rule `%s`", rule_id)
                continue
            rules[rule_id] = RuleOptions.from_raw(rule_id, entry)
        return LintConfig(rules=MappingProxyType(rules))


def load_config(path: str | Path) -> LintConfig:
    """Load rule options from a TOML file.

    Reads `[rules.<ruleId>]` tables, or `[tool.essbaselint.rules.<ruleId>]` when the
    file is a `pyproject.toml`.
    """
    config_path = Path(path)
    try:
        with config_path.open("rb") as handle:
            document = tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(f"Cannot read config file `{config_path}`: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in config file `{config_path}`: {exc}") from exc

    if config_path.name == "pyproject.toml":
        tool = document.get("tool", {})
        if not isinstance(tool, Mapping):
            logger.warning("Ignoring `tool` in `%s`: expected a table", config_path)
            return LintConfig()
        document = tool.get("essbaselint", {})
        if not isinstance(document, Mapping):
            logger.warning("Ignoring `tool.essbaselint` in `%s`: expected a table", config_path)
            return LintConfig()

    rules = document.get("rules", {})
    if not isinstance(rules, Mapping):
        logger.warning("Ignoring `rules` in `%s`: expected a table", config_path)
        return LintConfig()
    return LintConfig.from_mapping(rules)


def _decode_severity(rule_id: str, raw: object) -> Severity | None:
    if isinstance(raw, str) and raw.lower() in SEVERITIES:
        return raw.lower()  # type: ignore[return-value]
    logger.warning("Ignoring severity %r for rule `%s`: expected error/warning/info", raw, rule_id)
    return None
