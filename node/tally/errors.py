# ledger failure kinds
class LedgerError(Exception):
    """
    Base failure. Raised before any state is touched.
    """
    kind = "LedgerError"
    status_code = 400

    def __init__(self, message: str = ""):
        super().__init__(message or self.kind)
        self.message = message or self.kind


class AlreadyExists(LedgerError):
    kind = "AlreadyExists"
    status_code = 409


class NotFound(LedgerError):
    kind = "NotFound"
    status_code = 404


class AlreadyVoted(LedgerError):
    kind = "AlreadyVoted"
    status_code = 409


class InvalidIndex(LedgerError):
    kind = "InvalidIndex"


class InvalidCategory(LedgerError):
    kind = "InvalidCategory"


class InvalidProposals(LedgerError):
    kind = "InvalidProposals"


class CounterUnderflow(LedgerError):
    kind = "CounterUnderflow"
    status_code = 500
