"""Comparing a recorded pitch with its target note."""

from ..note_types import Note, TuningResult, Verdict


class TuningComparator:
    """Classifies a whole-Hz estimate against a note, with no tolerance band."""

    def compare(self, target: Note, estimate: int, reliable: bool = True) -> TuningResult:
        target_hz = target.frequency
        if estimate > target_hz:
            verdict = Verdict.TOO_HIGH
        elif estimate < target_hz:
            verdict = Verdict.TOO_LOW
        else:
            verdict = Verdict.IN_TUNE
        return TuningResult(
            target_hz=target_hz,
            estimate_hz=int(estimate),
            verdict=verdict,
            reliable=reliable,
        )
