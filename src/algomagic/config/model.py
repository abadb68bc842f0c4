# topmark:header:start
#
#   project      : Algomagic
#   file         : model.py
#   file_relpath : src/algomagic/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Configuration model for Algomagic (immutable runtime config + mutable builder).

Layers, lowest to highest precedence:
    1. Bundled defaults (``algomagic-default.toml``).
    2. ``[tool.algomagic]`` in ``pyproject.toml`` in the working directory.
    3. ``algomagic.toml`` in the working directory.
    4. An explicit config file (``--config``).
    5. CLI overrides.

Path semantics:
    - Paths declared in a config file are resolved against that file's directory.
    - Paths given on the CLI are resolved against the invocation CWD.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

from algomagic.config.io import (
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_list_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from algomagic.config.logging import get_logger
from algomagic.constants import LOCAL_TOML_CONFIG_NAME, PYPROJECT_TOML_NAME

if TYPE_CHECKING:
    from algomagic.config.io import TomlTable
    from algomagic.config.logging import AlgomagicLogger

logger: AlgomagicLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class SectionHeadings:
    """Second-level headings that delimit sections of an authored problem body."""

    input: str = "입력"
    output: str = "출력"
    notes: str = "노트"
    example_input: str = "예제 입력"
    example_output: str = "예제 출력"


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for Algomagic.

    Produced by `MutableConfig.freeze` after layering defaults, project files
    and CLI overrides. Use `Config.thaw` to obtain a builder for edits.

    Attributes:
        highlight_style (str): Pygments style name for inline-styled output.
        inline_styles (bool): Emit inline ``style`` attributes instead of CSS classes.
        line_separator (str): Markup placed between highlighted lines.
        tab_size (int): Tab width used when expanding leading indentation.
        markdown_extensions (tuple[str, ...]): Python-Markdown extension names.
        content_dir (Path): Root of authored MDX/MDC content.
        data_dir (Path): Root of generated JSON/SQL data.
        headings (SectionHeadings): Section headings recognized in problem MDX bodies.
        exclude_patterns (tuple[str, ...]): Gitignore-style patterns skipped by batch runs.
        config_files (tuple[Path, ...]): Config files that contributed to this snapshot.
    """

    highlight_style: str = "default"
    inline_styles: bool = True
    line_separator: str = "<br>"
    tab_size: int = 4
    markdown_extensions: tuple[str, ...] = ("fenced_code", "tables", "sane_lists")
    content_dir: Path = Path("content")
    data_dir: Path = Path("data")
    headings: SectionHeadings = field(default_factory=SectionHeadings)
    exclude_patterns: tuple[str, ...] = ()
    config_files: tuple[Path, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            highlight_style=self.highlight_style,
            inline_styles=self.inline_styles,
            line_separator=self.line_separator,
            tab_size=self.tab_size,
            markdown_extensions=list(self.markdown_extensions),
            content_dir=self.content_dir,
            data_dir=self.data_dir,
            headings={f.name: getattr(self.headings, f.name) for f in fields(self.headings)},
            exclude_patterns=list(self.exclude_patterns),
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    ``None`` means "not set by this layer; inherit from a lower layer".
    """

    highlight_style: str | None = None
    inline_styles: bool | None = None
    line_separator: str | None = None
    tab_size: int | None = None
    markdown_extensions: list[str] | None = None
    content_dir: Path | None = None
    data_dir: Path | None = None
    headings: dict[str, str] = field(default_factory=lambda: {})
    exclude_patterns: list[str] | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`.

        Unset values fall back to the `Config` field defaults.

        Raises:
            ValueError: If ``tab_size`` is negative.
        """
        if self.tab_size is not None and self.tab_size < 0:
            raise ValueError(f"tab_size must be >= 0, got {self.tab_size}")

        kwargs: dict[str, Any] = {}
        for name in (
            "highlight_style",
            "inline_styles",
            "line_separator",
            "tab_size",
            "content_dir",
            "data_dir",
        ):
            value = getattr(self, name)
            if value is not None:
                kwargs[name] = value
        if self.markdown_extensions is not None:
            kwargs["markdown_extensions"] = tuple(self.markdown_extensions)
        if self.exclude_patterns is not None:
            kwargs["exclude_patterns"] = tuple(self.exclude_patterns)
        known = {f.name for f in fields(SectionHeadings)}
        kwargs["headings"] = SectionHeadings(
            **{k: v for k, v in self.headings.items() if k in known}
        )
        kwargs["config_files"] = tuple(self.config_files)
        return Config(**kwargs)

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Load the default configuration from the bundled TOML resource."""
        return cls.from_toml_dict(load_defaults_dict(), config_file=None)

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``algomagic.toml`` and ``pyproject.toml`` (``[tool.algomagic]``).

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The builder, or None when a pyproject.toml has no
                ``[tool.algomagic]`` section.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_section = get_table_value(get_table_value(toml_data, "tool"), "algomagic")
            if not tool_section:
                logger.debug("No [tool.algomagic] section in %s", path)
                return None
            toml_data = tool_section

        draft = cls.from_toml_dict(toml_data, config_file=path)
        draft.config_files = [path]
        return draft

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None) -> MutableConfig:
        """Build a `MutableConfig` from a parsed TOML table.

        Args:
            data (TomlTable): Parsed configuration document.
            config_file (Path | None): Originating file, used as the base for
                relative paths; None for the bundled defaults.

        Returns:
            MutableConfig: The populated builder.
        """
        base: Path = config_file.parent if config_file is not None else Path.cwd()

        highlight = get_table_value(data, "highlight")
        markdown = get_table_value(data, "markdown")
        paths = get_table_value(data, "paths")
        authoring = get_table_value(data, "authoring")
        batch = get_table_value(data, "batch")

        def _path(key: str) -> Path | None:
            raw = get_string_value_or_none(paths, key)
            if raw is None:
                return None
            p = Path(raw)
            # Bundled defaults stay relative to the invocation CWD.
            if config_file is None or p.is_absolute():
                return p
            return (base / p).resolve()

        headings: dict[str, str] = {}
        for name in ("input", "output", "notes", "example_input", "example_output"):
            value = get_string_value_or_none(authoring, f"{name}_heading")
            if value is not None:
                headings[name] = value

        return cls(
            highlight_style=get_string_value_or_none(highlight, "style"),
            inline_styles=get_bool_value_or_none(highlight, "inline_styles"),
            line_separator=get_string_value_or_none(highlight, "line_separator"),
            tab_size=get_int_value_or_none(highlight, "tab_size"),
            markdown_extensions=get_string_list_or_none(markdown, "extensions"),
            content_dir=_path("content_dir"),
            data_dir=_path("data_dir"),
            headings=headings,
            exclude_patterns=get_string_list_or_none(batch, "exclude_patterns"),
        )

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return project config files in ``start``, lowest precedence first."""
        out: list[Path] = []
        for name in (PYPROJECT_TOML_NAME, LOCAL_TOML_CONFIG_NAME):
            candidate = start / name
            if candidate.is_file():
                out.append(candidate)
        return out

    @classmethod
    def load_merged(
        cls,
        *,
        cwd: Path | None = None,
        extra_config: Path | None = None,
    ) -> MutableConfig:
        """Layer defaults, discovered project files, and an explicit config file.

        Args:
            cwd (Path | None): Directory to search for project config (defaults to CWD).
            extra_config (Path | None): Explicit config file with highest file precedence.

        Returns:
            MutableConfig: The merged builder (not yet frozen).
        """
        merged = cls.from_defaults()
        files = cls.discover_local_config_files(cwd or Path.cwd())
        if extra_config is not None:
            files.append(extra_config)
        for path in files:
            layer = cls.from_toml_file(path)
            if layer is not None:
                merged = merged.merge_with(layer)
        logger.debug("Merged config from %d file(s): %s", len(merged.config_files), merged)
        return merged

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where values set in ``other`` override ``self``."""

        def pick(mine: Any, theirs: Any) -> Any:
            return theirs if theirs is not None else mine

        return MutableConfig(
            highlight_style=pick(self.highlight_style, other.highlight_style),
            inline_styles=pick(self.inline_styles, other.inline_styles),
            line_separator=pick(self.line_separator, other.line_separator),
            tab_size=pick(self.tab_size, other.tab_size),
            markdown_extensions=pick(self.markdown_extensions, other.markdown_extensions),
            content_dir=pick(self.content_dir, other.content_dir),
            data_dir=pick(self.data_dir, other.data_dir),
            headings={**self.headings, **other.headings},
            exclude_patterns=pick(self.exclude_patterns, other.exclude_patterns),
            config_files=[*self.config_files, *other.config_files],
        )
