"""Git operations module.

Usage:
    from yr.git import Repository

    repo = Repository(root, runner=runner)
    if repo.has_uncommitted_changes():
        ...
"""

from yr.git.repository import GitError, Repository

__all__ = ["GitError", "Repository"]
