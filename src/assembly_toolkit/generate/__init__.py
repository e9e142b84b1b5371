"""
Module: generate

Purpose:
    Selection policy layer of the network assembly engine. Given a
    partially built graph with open connectors, decide which section to
    attach next until no open connectors remain (a solution) or nothing
    can be attached (backtrack).

Key Functions:
    - create_callback(): Build a selection policy

Key Classes:
    - GenerateConfig: Tunables for a search
    - Dictionary: Lexicon of template sections
    - LinkStyle: Link store and unique section copies
    - SolutionCollector: Solution sink
    - SimpleCallback / RandomCallback: The selection policies

Not Included:
    The breadth-first driver that calls into this layer.
"""

from .config import GenerateConfig
from .policy_kind import PolicyKind
from .dictionary import Dictionary
from .link_style import LinkStyle
from .collect_style import SolutionCollector
from .callbacks import (
    CheckpointError,
    GenerateCallback,
    RandomCallback,
    SelectionPhase,
    SimpleCallback,
    create_callback,
)

__all__ = [
    # Config
    "GenerateConfig",
    "PolicyKind",
    # Collaborators
    "Dictionary",
    "LinkStyle",
    "SolutionCollector",
    # Callbacks
    "GenerateCallback",
    "SimpleCallback",
    "RandomCallback",
    "SelectionPhase",
    "CheckpointError",
    "create_callback",
]
