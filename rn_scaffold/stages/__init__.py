"""Generation stages, in pipeline order.

Key classes:
    TemplateFetcher        - Clone the template and drop its history
    Renamer                - Run react-native-rename
    DependencyInstaller    - npm / yarn install plus selected libraries
    PodInstaller           - CocoaPods install in ios/
    RepositoryInitializer  - git init / add / commit
"""

from .fetcher import TemplateFetcher, remove_git_metadata
from .installer import DependencyInstaller
from .pods import PodInstaller
from .renamer import Renamer
from .repo_init import RepositoryInitializer

__all__ = [
    "TemplateFetcher",
    "remove_git_metadata",
    "Renamer",
    "DependencyInstaller",
    "PodInstaller",
    "RepositoryInitializer",
]
