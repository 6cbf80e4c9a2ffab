"""
Data models for plugins and patches.

Discovered items (``Plugin``, ``Command``, ``Extension``) are frozen
dataclasses built once per discovery pass. Declarative inputs (config files,
front matter, loader options, patch specs) are Pydantic models so that they
are validated at the boundary.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    InstanceOf,
    ValidationError,
    field_validator,
    model_validator,
)

from weex.exceptions import ConfigError, PatchSpecError


@dataclass(frozen=True)
class Command:
    """
    A named, invocable unit of CLI behaviour backed by a single file.

    Attributes:
        name: Command name (file stem unless declared in front matter)
        file: Absolute path of the backing file
        run: Callable that imports the file and invokes its ``run`` function
        hidden: Whether the command is hidden from help listings
        description: Optional human-readable description
        aliases: Alternative names for the command
        command_path: Nested directory names under ``commands/`` plus the name
    """

    name: str
    file: str
    run: Callable[..., Any]
    hidden: bool = False
    description: str = ""
    aliases: Tuple[str, ...] = ()
    command_path: Tuple[str, ...] = ()

    def matches(self, name: str) -> bool:
        """Check whether ``name`` refers to this command or one of its aliases."""
        return name == self.name or name in self.aliases


@dataclass(frozen=True)
class Extension:
    """A named setup routine that installs a capability on the toolbox."""

    name: str
    file: str
    setup: Callable[[Any], Any]
    description: str = ""


@dataclass(frozen=True)
class Plugin:
    """A directory-rooted bundle of commands, extensions and defaults."""

    name: str
    directory: str
    hidden: bool = False
    description: str = ""
    defaults: Dict[str, Any] = field(default_factory=dict)
    commands: List[Command] = field(default_factory=list)
    extensions: List[Extension] = field(default_factory=list)

    def find_command(self, name: str) -> Optional[Command]:
        """Return the first command matching ``name`` (or an alias), if any."""
        for command in self.commands:
            if command.matches(name):
                return command
        return None


class PluginConfig(BaseModel):
    """
    Plugin-level config file (``<brand>.json``).

    Unknown keys are ignored so that config files can carry settings for
    other tools.
    """

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(None, description="Display name of the plugin")
    description: Optional[str] = Field(None, description="Plugin description")
    defaults: Dict[str, Any] = Field(
        default_factory=dict,
        description="Default configuration values exposed on Plugin.defaults",
    )


class PluginLoadOptions(BaseModel):
    """Options accepted by :func:`weex.loaders.load_plugin_from_directory`."""

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(None, description="Override the plugin's name")
    hidden: bool = Field(
        False, description="Hide the plugin and every command it provides"
    )
    brand: Optional[str] = Field(
        None, description="CLI brand used to locate <brand>.json (defaults to settings)"
    )
    command_file_pattern: List[str] = Field(
        default_factory=lambda: ["*.py"],
        description="Glob patterns a command file must match",
    )
    extension_file_pattern: List[str] = Field(
        default_factory=lambda: ["*.py"],
        description="Glob patterns an extension file must match",
    )
    preloaded_commands: List[InstanceOf[Command]] = Field(
        default_factory=list,
        description="Commands appended after the discovered ones",
    )

    @field_validator("command_file_pattern", "extension_file_pattern", mode="before")
    @classmethod
    def coerce_patterns(cls, value: Any) -> Any:
        """Allow a single glob string in place of a list."""
        if isinstance(value, str):
            return [value]
        return value

    @classmethod
    def coerce(
        cls, options: Union["PluginLoadOptions", Mapping[str, Any], None]
    ) -> "PluginLoadOptions":
        """
        Build options from a model, a plain mapping, or nothing.

        Raises:
            ConfigError: If the mapping has unknown keys or invalid values
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        try:
            return cls(**dict(options))
        except ValidationError as e:
            raise ConfigError(f"Invalid plugin load options: {e}") from e


class FrontMatter(BaseModel):
    """
    Declarative metadata at the head of a command or extension docstring.

    Extra keys are kept (available via ``model_extra``) but do not affect
    discovery.
    """

    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    hidden: Optional[bool] = None
    description: Optional[str] = None
    aliases: List[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def accept_single_alias(cls, data: Any) -> Any:
        """Accept ``alias: foo`` as shorthand for ``aliases: [foo]``."""
        if isinstance(data, dict) and "alias" in data:
            data = dict(data)
            alias = data.pop("alias")
            existing = data.get("aliases") or []
            if isinstance(existing, str):
                existing = [existing]
            aliases = alias if isinstance(alias, list) else [alias]
            data["aliases"] = list(existing) + aliases
        return data

    @field_validator("aliases", mode="before")
    @classmethod
    def coerce_aliases(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value


PATCH_ACTIONS = ("replace", "before", "after", "delete")


class PatchSpec(BaseModel):
    """
    A single patch action.

    Exactly one of ``replace``, ``before``, ``after`` or ``delete`` must be
    given. ``insert`` is the payload for the first three.
    """

    model_config = ConfigDict(extra="forbid")

    replace: Optional[str] = None
    before: Optional[str] = None
    after: Optional[str] = None
    delete: Optional[str] = None
    insert: Optional[str] = None

    @model_validator(mode="after")
    def check_single_action(self) -> "PatchSpec":
        actions = [key for key in PATCH_ACTIONS if getattr(self, key) is not None]
        if len(actions) != 1:
            raise ValueError(
                f"exactly one of {', '.join(PATCH_ACTIONS)} is required, "
                f"got {actions or 'none'}"
            )
        if actions[0] != "delete" and self.insert is None:
            raise ValueError(f"'{actions[0]}' requires 'insert'")
        return self

    @property
    def action(self) -> str:
        """Name of the action this spec performs."""
        return next(key for key in PATCH_ACTIONS if getattr(self, key) is not None)

    @property
    def target(self) -> str:
        """Substring the action is anchored on."""
        return getattr(self, self.action)

    @classmethod
    def coerce(cls, spec: Union["PatchSpec", Mapping[str, Any]]) -> "PatchSpec":
        """
        Build a spec from a model or mapping.

        Raises:
            PatchSpecError: If the spec is ambiguous or incomplete
        """
        if isinstance(spec, cls):
            return spec
        try:
            return cls(**dict(spec))
        except ValidationError as e:
            raise PatchSpecError(f"Invalid patch spec: {e}") from e
