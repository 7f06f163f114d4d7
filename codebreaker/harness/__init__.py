from .core import run_session, run_session_async, run_case, run_batch, summarize, random_secret
from .collaborators import Collaborator, ConsoleCollaborator, SyntheticCollaborator
from .session import Session
from .io import write_csv, write_manifest

__all__ = [
    "run_session", "run_session_async", "run_case", "run_batch", "summarize", "random_secret",
    "Collaborator", "ConsoleCollaborator", "SyntheticCollaborator", "Session",
    "write_csv", "write_manifest",
]
