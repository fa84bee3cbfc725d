"""Core types: results, exit codes, configuration, project detection."""

from .config import Config, ConfigError, load_config, load_project_config
from .errors import ErrorCode
from .project import Project, ProjectError, detect_project
from .result import Err, Ok, Result, is_err, is_ok

__all__ = [
    # config
    "Config",
    "ConfigError",
    "load_config",
    "load_project_config",
    # errors
    "ErrorCode",
    # project
    "Project",
    "ProjectError",
    "detect_project",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
]
