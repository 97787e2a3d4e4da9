"""Pydantic configuration models for knowledge search components."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

# ============================================================
# Catalog Configs
# ============================================================


class BuiltinCatalogConfig(BaseModel):
    """Use the built-in sample catalog."""

    type: Literal["builtin"] = "builtin"

    model_config = {"frozen": True}


class FileCatalogConfig(BaseModel):
    """Load the catalog from a YAML or JSON file."""

    type: Literal["file"] = "file"
    path: str

    model_config = {"frozen": True}


CatalogConfig = Annotated[
    BuiltinCatalogConfig | FileCatalogConfig,
    Field(discriminator="type"),
]


# ============================================================
# Resolver Config
# ============================================================


class ResolverConfig(BaseModel):
    """Configuration for article selection."""

    stable_selection: bool = False
    seed: int | None = None

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for per-session query logging."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class KnowledgeSearchConfig(BaseModel):
    """Root configuration for knowledge search."""

    catalog: CatalogConfig = Field(default_factory=BuiltinCatalogConfig)
    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
