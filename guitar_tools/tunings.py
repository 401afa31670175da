"""Catalog of the guitar tunings the tools know about."""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .note_types import Note


@dataclass(frozen=True)
class Tuning:
    """A named tuning: six (label, note) pairs from the lowest string up.

    Labels follow the on-screen convention: ``_F`` and ``_S`` mark flats and
    sharps, and lower case marks the higher of two strings sharing a letter.
    """

    name: str
    title: str
    strings: Tuple[Tuple[str, Note], ...]

    def notes(self) -> List[Note]:
        return [note for _, note in self.strings]

    def note_for(self, label: str) -> Note:
        """Return the note of the string labelled ``label`` (case-sensitive).

        Raises:
            KeyError: If no string carries that label
        """
        for string_label, note in self.strings:
            if string_label == label:
                return note
        raise KeyError(f"Tuning '{self.name}' has no string labelled '{label}'")


TUNINGS: Dict[str, Tuning] = {
    tuning.name: tuning
    for tuning in (
        Tuning(
            "standard",
            "Standard Tuning",
            (("E", Note.E2), ("A", Note.A2), ("D", Note.D3),
             ("G", Note.G3), ("B", Note.B3), ("e", Note.E4)),
        ),
        Tuning(
            "half-step-down",
            "Half Step Down Tuning",
            (("E_F", Note.E2F), ("A_F", Note.A2F), ("D_F", Note.D3F),
             ("G_F", Note.G3F), ("B_F", Note.B3F), ("e_F", Note.E4F)),
        ),
        Tuning(
            "full-step-down",
            "Full Step Down Tuning",
            (("D", Note.D2), ("G", Note.G2), ("C", Note.C3),
             ("F", Note.F3), ("A", Note.A3), ("d", Note.D4)),
        ),
        Tuning(
            "drop-d",
            "Drop D Tuning",
            (("D", Note.D2), ("A", Note.A2), ("d", Note.D3),
             ("G", Note.G3), ("B", Note.B3), ("E", Note.E4)),
        ),
        Tuning(
            "open-e",
            "Open E Tuning",
            (("E", Note.E2), ("B", Note.B2), ("e", Note.E3),
             ("G_S", Note.G3S), ("b", Note.B3), ("e4", Note.E4)),
        ),
    )
}


def get_tuning(name: str) -> Tuning:
    """Look up a tuning by name.

    Raises:
        ValueError: If the tuning is unknown
    """
    try:
        return TUNINGS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown tuning '{name}' (known tunings: {', '.join(TUNINGS)})"
        ) from None
