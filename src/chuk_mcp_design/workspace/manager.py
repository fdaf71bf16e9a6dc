"""
System Workspace - the façade over a design-system directory.

Provides async operations for reading, writing, validating and compiling
the documents of one workspace root. Every operation re-reads from disk;
there is no cache to invalidate, so any number of instances over the same
root can be used side by side.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, Field
from pydantic import ValidationError as ModelValidationError

from chuk_mcp_design.compiler.tokens import TokenCompiler
from chuk_mcp_design.constants import (
    CONTRACT_SUFFIX,
    CONTRACTS_DIR,
    CORE_TOKENS_FILE,
    JSON_INDENT,
    SYSTEM_FILE,
    TOKENS_DIR,
    Platform,
    Theme,
    contract_file,
    platform_rules_file,
    semantic_tokens_file,
)
from chuk_mcp_design.errors import (
    Err,
    ErrorCode,
    Ok,
    Result,
    ValidationResult,
    err,
    merge_validation_results,
)
from chuk_mcp_design.models.contract import ComponentContract, SystemManifest
from chuk_mcp_design.models.tokens import (
    CompiledTokens,
    CoreTokens,
    PlatformFileEntry,
    PlatformRules,
    SemanticFileEntry,
    SemanticTokens,
    TokenFileManifest,
)
from chuk_mcp_design.validation import (
    model_errors,
    validate_contract,
    validate_core_tokens,
    validate_examples,
    validate_platform_rules,
    validate_semantic_tokens,
    validate_system_manifest,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

Validator = Callable[[Any], ValidationResult]


class WorkspaceTree(BaseModel):
    """JSON files of a workspace grouped the way an editor shows them."""

    system: str | None = Field(None, description="system.json, if present")
    tokens: list[str] = Field(default_factory=list, description="Paths under tokens/")
    contracts: list[str] = Field(default_factory=list, description="Paths under contracts/")


def _reject_constant(name: str) -> Any:
    """json.loads hook: NaN and Infinity are not JSON."""
    raise ValueError(f"Invalid JSON constant: {name}")


def _to_document(data: BaseModel | dict[str, Any]) -> Any:
    """Wire form of a model, or the raw document unchanged."""
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", by_alias=True, exclude_none=True)
    return data


def validate_contract_document(data: Any) -> ValidationResult:
    """Schema and semantic checks, then the examples-as-usage consistency check."""
    result = validate_contract(data)
    if not result.valid:
        return result
    try:
        contract = ComponentContract.model_validate(data)
    except ModelValidationError as e:
        return model_errors(e)
    return validate_examples(contract)


class SystemWorkspace:
    """
    The core engine for all workspace operations.

    All file access goes through this class. Reads validate what they
    load; writes validate before anything touches the disk.
    """

    def __init__(self, root_path: Path | str):
        """
        Initialize the workspace.

        Args:
            root_path: Workspace root directory
        """
        self.root_path = Path(root_path)
        self.tokens_dir = self.root_path / TOKENS_DIR
        self.contracts_dir = self.root_path / CONTRACTS_DIR
        self.system_path = self.root_path / SYSTEM_FILE
        self.compiler = TokenCompiler()

    def __repr__(self) -> str:
        return f"SystemWorkspace({str(self.root_path)!r})"

    async def exists(self) -> bool:
        """Check that the workspace root is a directory. Never raises."""
        try:
            return self.root_path.is_dir()
        except OSError:
            return False

    # System manifest

    async def read_system(self) -> Result[SystemManifest]:
        """
        Read system.json.

        Returns:
            Ok with the manifest, or Err with SYSTEM_MANIFEST_NOT_FOUND /
            SYSTEM_MANIFEST_INVALID
        """
        return self._read_model(
            self.system_path,
            SystemManifest,
            validate_system_manifest,
            ErrorCode.SYSTEM_MANIFEST_NOT_FOUND,
            ErrorCode.SYSTEM_MANIFEST_INVALID,
            SYSTEM_FILE,
        )

    async def write_system(self, data: SystemManifest | dict[str, Any]) -> Result[Path]:
        """Validate and write system.json."""
        return self._write_document(
            self.system_path,
            _to_document(data),
            SystemManifest,
            validate_system_manifest,
            ErrorCode.SYSTEM_MANIFEST_INVALID,
            SYSTEM_FILE,
        )

    # Contracts

    async def list_contracts(self) -> list[str]:
        """
        List all contract names.

        Returns:
            Sorted contract names; empty if contracts/ does not exist
        """
        if not self.contracts_dir.is_dir():
            return []

        return sorted(
            path.name[: -len(CONTRACT_SUFFIX)]
            for path in self.contracts_dir.glob(f"*{CONTRACT_SUFFIX}")
            if path.is_file()
        )

    async def read_contract(self, name: str) -> Result[ComponentContract]:
        """
        Read and validate a contract by name.

        Args:
            name: Component name (e.g. 'Button')

        Returns:
            Ok with the contract, or Err with CONTRACT_NOT_FOUND /
            CONTRACT_INVALID (validator errors under details['errors'])
        """
        return self._read_model(
            self._get_contract_path(name),
            ComponentContract,
            validate_contract_document,
            ErrorCode.CONTRACT_NOT_FOUND,
            ErrorCode.CONTRACT_INVALID,
            f"contract {name}",
        )

    async def write_contract(
        self, name: str, data: ComponentContract | dict[str, Any]
    ) -> Result[Path]:
        """
        Validate and write a contract.

        Invalid contracts are refused, never persisted. The contracts
        directory is created if needed.

        Args:
            name: Component name
            data: Contract model or raw contract document

        Returns:
            Ok with the written path, or Err(CONTRACT_INVALID)
        """
        return self._write_document(
            self._get_contract_path(name),
            _to_document(data),
            ComponentContract,
            validate_contract_document,
            ErrorCode.CONTRACT_INVALID,
            f"contract {name}",
        )

    def _get_contract_path(self, name: str) -> Path:
        """Get the file path for a contract."""
        safe_name = name.replace("/", "_").replace("\\", "_")
        return self.contracts_dir / contract_file(safe_name)

    # Tokens

    async def list_token_files(self) -> TokenFileManifest:
        """
        Classify the files in tokens/.

        Recognizes core.json, semantic.<light|dark>.json and
        platform.<web|rn>.json. Anything else is ignored, and a missing
        directory yields an empty manifest.
        """
        manifest = TokenFileManifest()
        if not self.tokens_dir.is_dir():
            return manifest

        themes = {semantic_tokens_file(t): t for t in Theme}
        platforms = {platform_rules_file(p): p for p in Platform}

        for path in sorted(self.tokens_dir.iterdir()):
            if not path.is_file():
                continue
            file = path.name
            if file == CORE_TOKENS_FILE:
                manifest.core.append(file)
            elif file in themes:
                manifest.semantic.append(SemanticFileEntry(file=file, theme=themes[file]))
            elif file in platforms:
                manifest.platform.append(PlatformFileEntry(file=file, platform=platforms[file]))

        return manifest

    async def read_core_tokens(self) -> Result[CoreTokens]:
        """Read and validate tokens/core.json."""
        return self._read_model(
            self.tokens_dir / CORE_TOKENS_FILE,
            CoreTokens,
            validate_core_tokens,
            ErrorCode.TOKEN_FILE_NOT_FOUND,
            ErrorCode.TOKEN_FILE_INVALID,
            CORE_TOKENS_FILE,
        )

    async def read_semantic_tokens(self, theme: Theme | str) -> Result[SemanticTokens]:
        """
        Read and validate the semantic tokens for a theme.

        Raises:
            ValueError: If theme is not 'light' or 'dark'
        """
        file = semantic_tokens_file(Theme(theme))
        return self._read_model(
            self.tokens_dir / file,
            SemanticTokens,
            validate_semantic_tokens,
            ErrorCode.TOKEN_FILE_NOT_FOUND,
            ErrorCode.TOKEN_FILE_INVALID,
            file,
        )

    async def read_platform_rules(self, platform: Platform | str) -> Result[PlatformRules]:
        """
        Read and validate the platform rules for a platform.

        Raises:
            ValueError: If platform is not 'web' or 'rn'
        """
        file = platform_rules_file(Platform(platform))
        return self._read_model(
            self.tokens_dir / file,
            PlatformRules,
            validate_platform_rules,
            ErrorCode.TOKEN_FILE_NOT_FOUND,
            ErrorCode.TOKEN_FILE_INVALID,
            file,
        )

    async def write_core_tokens(self, data: CoreTokens | dict[str, Any]) -> Result[Path]:
        """Validate and write tokens/core.json."""
        return self._write_document(
            self.tokens_dir / CORE_TOKENS_FILE,
            _to_document(data),
            CoreTokens,
            validate_core_tokens,
            ErrorCode.TOKEN_FILE_INVALID,
            CORE_TOKENS_FILE,
        )

    async def write_semantic_tokens(
        self, theme: Theme | str, data: SemanticTokens | dict[str, Any]
    ) -> Result[Path]:
        """Validate and write tokens/semantic.<theme>.json."""
        file = semantic_tokens_file(Theme(theme))
        return self._write_document(
            self.tokens_dir / file,
            _to_document(data),
            SemanticTokens,
            validate_semantic_tokens,
            ErrorCode.TOKEN_FILE_INVALID,
            file,
        )

    async def write_platform_rules(
        self, platform: Platform | str, data: PlatformRules | dict[str, Any]
    ) -> Result[Path]:
        """Validate and write tokens/platform.<platform>.json."""
        file = platform_rules_file(Platform(platform))
        return self._write_document(
            self.tokens_dir / file,
            _to_document(data),
            PlatformRules,
            validate_platform_rules,
            ErrorCode.TOKEN_FILE_INVALID,
            file,
        )

    async def compile_tokens(
        self, platform: Platform | str, theme: Theme | str
    ) -> Result[CompiledTokens]:
        """
        Compile tokens for a platform and theme.

        Reads core tokens, the theme's semantic tokens and the platform's
        rules, then delegates to the token compiler. The first failure is
        returned unchanged, including TOKEN_REF_NOT_FOUND.

        Args:
            platform: 'web' or 'rn'
            theme: 'light' or 'dark'

        Returns:
            Result with the compiled semantic key → value map

        Raises:
            ValueError: If platform or theme is not a known value
        """
        platform = Platform(platform)
        theme = Theme(theme)

        core = await self.read_core_tokens()
        if isinstance(core, Err):
            return core
        semantic = await self.read_semantic_tokens(theme)
        if isinstance(semantic, Err):
            return semantic
        rules = await self.read_platform_rules(platform)
        if isinstance(rules, Err):
            return rules

        logger.debug(f"Compiling tokens for {platform.value}/{theme.value} in {self.root_path}")
        return self.compiler.compile(core.value, semantic.value, rules.value)

    # Validation

    async def validate(self) -> ValidationResult:
        """
        Validate the entire workspace.

        Checks the system manifest, every contract, core tokens, and the
        semantic and platform files. A missing theme or platform file is
        not an error; malformed content is. Every failing document is
        reported, not just the first.

        Returns:
            Merged ValidationResult, one error per failing document
        """
        if not await self.exists():
            result = ValidationResult()
            result.add_error(
                ".",
                f"Workspace not found: {self.root_path}",
                ErrorCode.WORKSPACE_NOT_FOUND.value,
            )
            return result

        results: list[ValidationResult] = [
            self._document_result(SYSTEM_FILE, await self.read_system())
        ]

        for name in await self.list_contracts():
            results.append(
                self._document_result(
                    f"{CONTRACTS_DIR}/{contract_file(name)}", await self.read_contract(name)
                )
            )

        results.append(
            self._document_result(f"{TOKENS_DIR}/{CORE_TOKENS_FILE}", await self.read_core_tokens())
        )

        for theme in Theme:
            results.append(
                self._document_result(
                    f"{TOKENS_DIR}/{semantic_tokens_file(theme)}",
                    await self.read_semantic_tokens(theme),
                    optional=True,
                )
            )

        for platform in Platform:
            results.append(
                self._document_result(
                    f"{TOKENS_DIR}/{platform_rules_file(platform)}",
                    await self.read_platform_rules(platform),
                    optional=True,
                )
            )

        merged = merge_validation_results(*results)
        logger.debug(f"Validated {self.root_path}: {len(merged.errors)} error(s)")
        return merged

    @staticmethod
    def _document_result(
        relative_path: str, outcome: Result[Any], optional: bool = False
    ) -> ValidationResult:
        """Turn one document's read outcome into a validation result."""
        result = ValidationResult()
        if isinstance(outcome, Ok):
            return result

        error = outcome.error
        if optional and error.code == ErrorCode.TOKEN_FILE_NOT_FOUND:
            return result

        # Validator errors when there are some, else e.g. the parse line/column
        value = error.details.get("errors", error.details or None)
        result.add_error(relative_path, error.message, error.code.value, value)
        return result

    # Tree

    async def file_tree(self) -> WorkspaceTree:
        """Group the workspace's JSON files for an editor file explorer."""
        tree = WorkspaceTree()
        if self.system_path.is_file():
            tree.system = SYSTEM_FILE

        for directory, target in ((self.tokens_dir, tree.tokens), (self.contracts_dir, tree.contracts)):
            if not directory.is_dir():
                continue
            target.extend(
                f"{directory.name}/{path.name}"
                for path in sorted(directory.glob("*.json"))
                if path.is_file()
            )

        return tree

    # Document I/O

    @staticmethod
    def _invalid(invalid: ErrorCode, label: str, path: Path, result: ValidationResult) -> Err:
        return err(
            invalid,
            f"{label} validation failed: {result.summary()}",
            str(path),
            {"errors": [e.to_dict() for e in result.errors]},
        )

    def _build_model(
        self,
        path: Path,
        data: Any,
        model: type[ModelT],
        validator: Validator,
        invalid: ErrorCode,
        label: str,
    ) -> Result[ModelT]:
        """Validate a parsed document and build its model."""
        result = validator(data)
        if result.valid:
            try:
                return Ok(model.model_validate(data))
            except ModelValidationError as e:
                result = model_errors(e)
        return self._invalid(invalid, label, path, result)

    def _read_model(
        self,
        path: Path,
        model: type[ModelT],
        validator: Validator,
        not_found: ErrorCode,
        invalid: ErrorCode,
        label: str,
    ) -> Result[ModelT]:
        """Load, parse and validate one document, then build its model."""
        logger.debug(f"Reading {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return err(not_found, f"{label} not found", str(path))
        except (OSError, UnicodeDecodeError) as e:
            return err(invalid, f"Failed to read {label}: {e}", str(path))

        try:
            data = json.loads(text, parse_constant=_reject_constant)
        except json.JSONDecodeError as e:
            return err(
                invalid,
                f"Failed to parse {label}: {e.msg} (line {e.lineno}, column {e.colno})",
                str(path),
                {"line": e.lineno, "column": e.colno},
            )
        except ValueError as e:
            return err(invalid, f"Failed to parse {label}: {e}", str(path))

        return self._build_model(path, data, model, validator, invalid, label)

    def _write_document(
        self,
        path: Path,
        document: Any,
        model: type[BaseModel],
        validator: Validator,
        invalid: ErrorCode,
        label: str,
    ) -> Result[Path]:
        """Validate a document and write it as 2-space indented JSON."""
        built = self._build_model(path, document, model, validator, invalid, label)
        if isinstance(built, Err):
            logger.warning(f"Refusing to write invalid {label}: {built.error.message}")
            return built

        try:
            text = json.dumps(document, indent=JSON_INDENT, ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError) as e:
            logger.warning(f"Refusing to write {label}: {e}")
            return err(invalid, f"Failed to serialize {label}: {e}", str(path))

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text + "\n", encoding="utf-8")
        except OSError as e:
            return err(invalid, f"Failed to write {label}: {e}", str(path))

        logger.debug(f"Wrote {path}")
        return Ok(path)
