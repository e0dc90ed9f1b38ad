import logging
import pprint as pp
from contextlib import contextmanager

from iconsdk.exception import IconServiceBaseException

from iiss.exceptions import ResultTimeoutException

logger = logging.getLogger(__name__)


def assert_success(tx_result: dict) -> None:
    if not tx_result or tx_result.get("status") != 1:
        raise AssertionError(pp.pformat(tx_result))


def expect_success(action, *args, **kwargs) -> dict:
    """
    Runs a transaction-producing action and asserts its result succeeded.
    Client errors and timeouts are reported as assertion failures.
    """
    try:
        tx_result = action(*args, **kwargs)
    except (IconServiceBaseException, ResultTimeoutException) as e:
        raise AssertionError(f"{getattr(action, '__name__', action)} failed: {e}") from e
    assert_success(tx_result)
    return tx_result


@contextmanager
def scenario(name: str):
    logger.info(f"ENTER {name}")
    yield
    logger.info(f"EXIT {name}")
