from skillkit.integrations.git.abc import Git
from skillkit.integrations.git.real import RealGit

__all__ = ["Git", "RealGit"]
