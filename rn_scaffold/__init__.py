"""rn-scaffold -- create a React Native project from a template repository.

Quick usage::

    from rn_scaffold import Config, Pipeline, PromptCollector

    config = Config()
    collector = PromptCollector(config.variant, config.base_dir)
    state = await Pipeline(config).run(collector)
"""

from .config import Config, VariantConfig, get_variant
from .models import GenerationRequest, PackageManager, RepoContext
from .pipeline import Pipeline
from .prompts import PromptCollector

__all__ = [
    "Config",
    "VariantConfig",
    "get_variant",
    "GenerationRequest",
    "PackageManager",
    "RepoContext",
    "Pipeline",
    "PromptCollector",
]
