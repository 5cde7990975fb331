import threading

from precision_utility.PrecisionError import EvaluationInterrupted


class CancellationToken:
    """
    Cancellation flag shared between an evaluation and whoever may stop it.

    The evaluation only reads the flag; any other thread may set it at any time.
    """

    def __init__(self):
        self._event = threading.Event()

    def cancel(self):
        self._event.set()

    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def check(self, where: str | None = None):
        """Raise EvaluationInterrupted if cancellation has been requested."""
        if self._event.is_set():
            raise EvaluationInterrupted(details=where)


def check_cancelled(token, where: str | None = None):
    """
    Poll a token, a plain threading.Event, or None (never cancelled).
    """
    if token is None:
        return
    if isinstance(token, CancellationToken):
        token.check(where)
        return
    if token.is_set():
        raise EvaluationInterrupted(details=where)
