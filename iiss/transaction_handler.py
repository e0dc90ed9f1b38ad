import logging
import pprint as pp
from time import monotonic, sleep

from iconsdk.builder.call_builder import CallBuilder
from iconsdk.builder.transaction_builder import CallTransactionBuilder, TransactionBuilder, DeployTransactionBuilder
from iconsdk.exception import JSONRPCException
from iconsdk.icon_service import IconService
from iconsdk.libs.in_memory_zip import gen_deploy_data_content
from iconsdk.signed_transaction import SignedTransaction
from iconsdk.wallet.wallet import KeyWallet

from iiss.constants import *
from iiss.exceptions import ResultTimeoutException

logger = logging.getLogger(__name__)


PENDING_RPC_CODES = (JSONRPCException.SYSTEM_TX_PENDING,
                     JSONRPCException.SYSTEM_TX_EXECUTING,
                     JSONRPCException.SYSTEM_TX_NOT_FOUND)


def _is_pending(e: JSONRPCException) -> bool:
    return e.rpc_code in PENDING_RPC_CODES


class TransactionHandler:
    """
    Builds, signs and sends transactions through an IconService and waits for their results.
    """

    def __init__(self, icon_service: IconService, nid: int, result_timeout: float = 30, poll_interval: float = 1,
                 step_limit: int = DEFAULT_STEP_LIMIT):
        self.icon_service = icon_service
        self.nid = nid
        self.result_timeout = result_timeout
        self.poll_interval = poll_interval
        self.step_limit = step_limit

    def get_balance(self, address: str) -> int:
        return self.icon_service.get_balance(address)

    def call(self, to: str, method: str, params: dict = None, from_: str = None):
        builder = CallBuilder() \
            .to(to) \
            .method(method) \
            .params(params or {})
        if from_ is not None:
            builder = builder.from_(from_)
        return self.icon_service.call(builder.build())

    def invoke(self, wallet: KeyWallet, to: str, method: str, params: dict = None, value: int = 0,
               step_limit: int = None) -> str:
        tx = CallTransactionBuilder() \
            .from_(wallet.get_address()) \
            .to(to) \
            .value(value) \
            .nid(self.nid) \
            .step_limit(step_limit or self.step_limit) \
            .nonce(100) \
            .method(method) \
            .params(params or {}) \
            .build()
        return self.icon_service.send_transaction(SignedTransaction(tx, wallet))

    def transfer(self, wallet: KeyWallet, to: str, value: int, step_limit: int = None) -> str:
        tx = TransactionBuilder() \
            .from_(wallet.get_address()) \
            .to(to) \
            .value(value) \
            .step_limit(step_limit or self.step_limit) \
            .nid(self.nid) \
            .build()
        return self.icon_service.send_transaction(SignedTransaction(tx, wallet))

    def deploy(self, wallet: KeyWallet, score_path: str, params: dict = None, to: str = CHAIN_SCORE_ADDRESS,
               step_limit: int = DEPLOY_STEP_LIMIT) -> str:
        score_content_bytes = gen_deploy_data_content(score_path)
        transaction = DeployTransactionBuilder() \
            .from_(wallet.get_address()) \
            .to(to) \
            .nid(self.nid) \
            .step_limit(step_limit) \
            .nonce(100) \
            .content_type("application/zip") \
            .content(score_content_bytes) \
            .params(params or {}) \
            .build()
        return self.icon_service.send_transaction(SignedTransaction(transaction, wallet))

    def get_result(self, tx_hash: str, timeout: float = None) -> dict:
        """
        Polls for the result of tx_hash until it is available.
        :param tx_hash: hash returned by send_transaction
        :param timeout: seconds to wait, defaults to result_timeout
        :return: transaction result
        :raises ResultTimeoutException: result not available in time
        """
        timeout = self.result_timeout if timeout is None else timeout
        deadline = monotonic() + timeout
        while True:
            try:
                return self.icon_service.get_transaction_result(tx_hash)
            except JSONRPCException as e:
                if not _is_pending(e):
                    raise
            if monotonic() >= deadline:
                raise ResultTimeoutException(tx_hash, timeout)
            sleep(self.poll_interval)

    def invoke_and_wait(self, wallet: KeyWallet, to: str, method: str, params: dict = None, value: int = 0,
                        step_limit: int = None) -> dict:
        tx_result = self.get_result(self.invoke(wallet, to, method, params, value, step_limit))
        logger.debug(f"{method} -> {pp.pformat(tx_result)}")
        return tx_result

    def transfer_and_wait(self, wallet: KeyWallet, to: str, value: int) -> dict:
        return self.get_result(self.transfer(wallet, to, value))

    def deploy_and_wait(self, wallet: KeyWallet, score_path: str, params: dict = None) -> dict:
        return self.get_result(self.deploy(wallet, score_path, params))
