from __future__ import annotations

"""Trained-ensemble contract.

The engine never fits or inspects models; it only needs the per-label model
handles, in chain order, for each ensemble member, plus the label names.
"""

from dataclasses import dataclass
from typing import Any, Sequence, Tuple

from pugs.core.errors import ShapeError


@dataclass(frozen=True)
class EnsembleModel:
    """An Ensemble of Classifier Chains (ECC).

    Parameters
    ----------
    fits : sequence of sequences
        ``fits[k][l]`` is member ``k``'s model handle for label ``l``.
    y_labels : sequence of str
        Label names, in the same order as the handles of each member.
    """

    fits: Tuple[Tuple[Any, ...], ...]
    y_labels: Tuple[str, ...]

    def __init__(self, fits: Sequence[Sequence[Any]], y_labels: Sequence[Any]):
        members = tuple(tuple(member) for member in fits)
        labels = tuple(str(lbl) for lbl in y_labels)

        if not members:
            raise ShapeError("ensemble must contain at least one member")
        if not labels:
            raise ShapeError("ensemble must have at least one label")
        if len(set(labels)) != len(labels):
            raise ShapeError(f"label names must be unique; got {list(labels)}")

        for k, member in enumerate(members):
            if len(member) != len(labels):
                raise ShapeError(
                    f"member {k} has {len(member)} per-label models but there are "
                    f"{len(labels)} labels; every member must have exactly one model per label"
                )

        object.__setattr__(self, "fits", members)
        object.__setattr__(self, "y_labels", labels)

    @property
    def n_models(self) -> int:
        return len(self.fits)

    @property
    def n_labels(self) -> int:
        return len(self.y_labels)
