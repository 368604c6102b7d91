from .executor import GitClient, GitResult
from .preconditions import (
    PRECONDITIONS,
    Precondition,
    RepositoryInspector,
    RepositoryState,
    check_preconditions,
)
