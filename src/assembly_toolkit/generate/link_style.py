"""
Module: generate.link_style

Purpose:
    Materializes edges and section copies for the selection callbacks.
    Owns the link store that make_link()/have_link() write to and read
    from.

Key Classes:
    - LinkStyle: Undirected link creation/lookup, unique section copies

Dependencies:
    - itertools (std)
    - core.models: Connector, Link, Point, Section

Used By:
    - generate.callbacks.phased: make_link(), have_link(), lexicon copies
"""

from __future__ import annotations

import itertools
import logging
from typing import Dict, Optional, Tuple

from assembly_toolkit.core.models import Connector, Link, Point, Section

logger = logging.getLogger(__name__)


class LinkStyle:
    """
    Undirected link store plus the unique-copy factory for sections.

    Adding a link that is already stored returns the stored link instead
    of a duplicate, so the store behaves like a set of edges.

    Example:
        >>> style = LinkStyle()
        >>> link = style.create_undirected_link(s_plus, s_minus, a, b)
        >>> style.have_undirected_link(s_minus, s_plus, b, a) is link
        True
    """

    def __init__(self) -> None:
        self._links: Dict[Link, Link] = {}
        self._pair_counts: Dict[frozenset, int] = {}
        self._instances = itertools.count(1)

    # ─────────────────────────────────────────────────────────────────────────
    # Links
    # ─────────────────────────────────────────────────────────────────────────

    def create_undirected_link(
        self,
        fm_con: Connector,
        to_con: Connector,
        fm_pnt: Point,
        to_pnt: Point,
    ) -> Link:
        """
        Create an undirected edge joining ``fm_pnt`` and ``to_pnt``.

        Neither point can be identified as head or tail afterwards.

        Returns:
            The new link, or the equal link already in the store
        """
        link = Link.between(fm_con, to_con, fm_pnt, to_pnt)
        stored = self._links.get(link)
        if stored is not None:
            return stored

        self._links[link] = link
        key = link.points
        self._pair_counts[key] = self._pair_counts.get(key, 0) + 1
        logger.debug(f"Linked {link}")
        return link

    def have_undirected_link(
        self,
        fm_con: Connector,
        to_con: Connector,
        fm_pnt: Point,
        to_pnt: Point,
    ) -> Optional[Link]:
        """
        Look up an edge without creating it.

        Returns:
            The stored link, or None when absent
        """
        return self._links.get(Link.between(fm_con, to_con, fm_pnt, to_pnt))

    def pair_link_count(self, p1: Point, p2: Point) -> int:
        """Number of stored links joining ``p1`` and ``p2``."""
        return self._pair_counts.get(frozenset({p1, p2}), 0)

    @property
    def links(self) -> Tuple[Link, ...]:
        return tuple(self._links)

    def __len__(self) -> int:
        return len(self._links)

    # ─────────────────────────────────────────────────────────────────────────
    # Sections
    # ─────────────────────────────────────────────────────────────────────────

    def create_unique_section(self, section: Section) -> Section:
        """
        Copy a lexicon entry so it can be attached more than once.

        Args:
            section: Template (or copy) to duplicate

        Returns:
            Section with the same point name and connectors, and a point
            instance id never handed out before by this LinkStyle
        """
        return section.with_instance(str(next(self._instances)))
