"""Branch classification.

Maps a branch, its upstream link and ancestry facts to exactly one
Decision. Classification is a pure function of per-branch facts; it
never looks at other branches or at what the engine has done so far.
"""

from typing import Callable

from git_sync.constants import REASON_MERGED
from git_sync.models.branch import (
    AncestryFact,
    Branch,
    Comparison,
    Decision,
    LinkKind,
    UpstreamLink,
)
from git_sync.services.git.ref_store import RefStore
from git_sync.utils.logging import get_logger

logger = get_logger(__name__)

AncestryLookup = Callable[[str, str], Comparison]


def compare_refs(ref_store: RefStore, a: str, b: str) -> Comparison:
    """Compare local tip `a` with candidate tip `b`."""
    old_tip, new_tip = ref_store.resolve_revision_pair(a, b)
    if old_tip.lower() == new_tip.lower():
        fact = AncestryFact.IDENTICAL
    elif ref_store.is_ancestor(old_tip, new_tip):
        fact = AncestryFact.A_IS_ANCESTOR_OF_B
    else:
        fact = AncestryFact.DIVERGED
    return Comparison(fact, old_tip, new_tip)


def ancestry_lookup(ref_store: RefStore) -> AncestryLookup:
    """Bind compare_refs to a RefStore."""
    def lookup(a: str, b: str) -> Comparison:
        return compare_refs(ref_store, a, b)
    return lookup


class BranchClassifier:
    """Decides what to do with each branch."""

    def __init__(self, lookup: AncestryLookup, default_ref: str):
        """Initialize the classifier.

        Args:
            lookup: Callable comparing two refs
            default_ref: Full ref of the remote's default branch, e.g. refs/remotes/origin/main
        """
        self.lookup = lookup
        self.default_ref = default_ref

    def classify(self, branch: Branch, link: UpstreamLink) -> Decision:
        """Return the single Decision for a branch."""
        if link.kind in (LinkKind.TRACKED_ON_MAIN_REMOTE, LinkKind.UNTRACKED_BUT_MIRRORED):
            comparison = self.lookup(branch.ref, link.ref)
            logger.debug(f"{branch.name} vs {link.ref}: {comparison.fact.value}")

            if comparison.fact == AncestryFact.IDENTICAL:
                return Decision.no_op()
            if comparison.fact == AncestryFact.A_IS_ANCESTOR_OF_B:
                return Decision.fast_forward(link.ref, comparison.old_tip, comparison.new_tip)
            return Decision.warn_diverged(link.ref)

        if link.kind == LinkKind.GONE:
            comparison = self.lookup(branch.ref, self.default_ref)
            logger.debug(f"{branch.name} (gone) vs {self.default_ref}: {comparison.fact.value}")

            # A branch equal to the default branch is contained in it too
            if comparison.fact in (AncestryFact.IDENTICAL, AncestryFact.A_IS_ANCESTOR_OF_B):
                return Decision.delete(self.default_ref, REASON_MERGED, comparison.old_tip)
            return Decision.warn_unmerged(self.default_ref)

        return Decision.no_op()
