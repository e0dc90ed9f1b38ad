class SetupFailure(Exception):
    """
    Raised when the fixture cannot be bootstrapped. Nothing after it can run.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ResultTimeoutException(Exception):
    def __init__(self, tx_hash: str, timeout: float):
        self.tx_hash = tx_hash
        self.timeout = timeout
        self.message = f"Result of {tx_hash} not available after {timeout} seconds"
        super().__init__(self.message)


class TransactionFailureException(Exception):
    def __init__(self, tx_result: dict):
        self.tx_result = tx_result
        failure = tx_result.get("failure") or {}
        self.message = f"Transaction {tx_result.get('txHash')} failed: {failure.get('message', tx_result)}"
        super().__init__(self.message)
