"""
Token Compiler - resolves semantic tokens into platform values.

The pipeline:
    SemanticTokens (theme) → CoreTokens (raw values) → PlatformRules (units)
    → CompiledTokens (flat semantic key → rendered value)

The compiled map is keyed by semantic names only; callers never see
core token keys.
"""

from __future__ import annotations

from decimal import Decimal

from chuk_mcp_design.constants import DEFAULT_REM_BASE, TokenTransform
from chuk_mcp_design.errors import ErrorCode, Ok, Result, err
from chuk_mcp_design.models.tokens import (
    CompiledTokens,
    CoreTokens,
    PlatformRule,
    PlatformRules,
    SemanticTokens,
)


def format_number(value: int | float) -> str:
    """Render a number as JSON would (16.0 -> "16", 1e-07 -> "1e-7")."""
    if isinstance(value, int):
        return str(value)
    magnitude = abs(value)
    if value.is_integer() and magnitude < 1e21:
        return str(int(value))
    if 1e-6 <= magnitude < 1e21:
        return format(Decimal(repr(value)), "f")
    mantissa, _, exponent = repr(value).partition("e")
    return f"{mantissa}e{int(exponent):+d}"


class TokenCompiler:
    """
    Compiles tokens for one platform and theme.

    Rules are looked up by category; when a category appears more than
    once in a rule set, the last rule wins.
    """

    def compile(
        self,
        core_tokens: CoreTokens,
        semantic_tokens: SemanticTokens,
        platform_rules: PlatformRules,
    ) -> Result[CompiledTokens]:
        """
        Resolve every semantic token and apply platform transforms.

        Args:
            core_tokens: Raw values
            semantic_tokens: Theme aliases referencing core keys
            platform_rules: Unit transforms for the target platform

        Returns:
            Ok with the compiled map, or Err(TOKEN_REF_NOT_FOUND) for the
            first semantic token (in file order) whose ref does not resolve
        """
        rules = self.build_rule_map(platform_rules)
        compiled: CompiledTokens = {}

        for token_name, semantic_token in semantic_tokens.tokens.items():
            core_token = core_tokens.tokens.get(semantic_token.ref)
            if core_token is None:
                return err(
                    ErrorCode.TOKEN_REF_NOT_FOUND,
                    f'Semantic token "{token_name}" references unknown core token '
                    f'"{semantic_token.ref}"',
                    details={"tokenName": token_name, "ref": semantic_token.ref},
                )

            rule = rules.get(core_token.category.value) if core_token.category else None
            compiled[token_name] = self.transform_value(core_token.value, rule)

        return Ok(compiled)

    @staticmethod
    def build_rule_map(platform_rules: PlatformRules) -> dict[str, PlatformRule]:
        """Map category → rule; later rules overwrite earlier ones."""
        rules: dict[str, PlatformRule] = {}
        for rule in platform_rules.rules:
            rules[rule.category] = rule
        return rules

    @staticmethod
    def transform_value(value: str | int | float, rule: PlatformRule | None) -> str | int | float:
        """Apply a platform rule to a core value. Strings are never transformed."""
        if isinstance(value, str) or rule is None:
            return value

        transform = rule.transform
        if transform == TokenTransform.PX:
            return f"{format_number(value)}px"
        if transform == TokenTransform.REM:
            base = rule.rem_base if rule.rem_base is not None else DEFAULT_REM_BASE
            return f"{format_number(value / base)}rem"
        if transform in (TokenTransform.NUMBER, TokenTransform.PASSTHROUGH):
            return value
        raise AssertionError(f"Unhandled transform: {transform}")


def compile_tokens(
    core_tokens: CoreTokens,
    semantic_tokens: SemanticTokens,
    platform_rules: PlatformRules,
) -> Result[CompiledTokens]:
    """
    Convenience function to compile tokens.

    Args:
        core_tokens: Raw values
        semantic_tokens: Theme aliases
        platform_rules: Unit transforms

    Returns:
        Result with the compiled map
    """
    compiler = TokenCompiler()
    return compiler.compile(core_tokens, semantic_tokens, platform_rules)
