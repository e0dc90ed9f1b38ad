import logging
from collections import namedtuple

from iconsdk.exception import IconServiceBaseException
from iconsdk.wallet.wallet import KeyWallet

from iiss.constants import *
from iiss.exceptions import TransactionFailureException
from iiss.transaction_handler import TransactionHandler

logger = logging.getLogger(__name__)

Balance = namedtuple("Balance", ["value", "success"])


def to_loop(amount) -> int:
    """
    "1000" -> 1000 ICX in loop
    """
    return int(amount) * ICX


class IISSScore:
    """
    Facade of the deployed IISS SCORE, which stakes, delegates and bonds with its own balance.
    """

    def __init__(self, tx_handler: TransactionHandler, address: str):
        self.tx_handler = tx_handler
        self.address = address

    @classmethod
    def install(cls, tx_handler: TransactionHandler, wallet: KeyWallet, score_path: str,
                params: dict = None) -> 'IISSScore':
        tx_result = tx_handler.deploy_and_wait(wallet, score_path, params)
        if tx_result.get("status") != 1 or "scoreAddress" not in tx_result:
            raise TransactionFailureException(tx_result)
        logger.info(f"New SCORE address: {tx_result['scoreAddress']}")
        return cls(tx_handler, tx_result["scoreAddress"])

    def get_address(self) -> str:
        return self.address

    def set_stake(self, wallet: KeyWallet, amount: str) -> dict:
        # the staked ICX is sent along, the SCORE stakes from its own balance
        value = to_loop(amount)
        return self.tx_handler.invoke_and_wait(wallet, self.address, "setStake", {"value": hex(value)}, value)

    def set_delegation(self, wallet: KeyWallet, address: str, amount: str) -> dict:
        paras = {"address": str(address), "value": hex(to_loop(amount))}
        return self.tx_handler.invoke_and_wait(wallet, self.address, "setDelegation", paras)

    def set_bond(self, wallet: KeyWallet, address: str, amount: str) -> dict:
        paras = {"address": str(address), "value": hex(to_loop(amount))}
        return self.tx_handler.invoke_and_wait(wallet, self.address, "setBond", paras)

    def get_stake(self, wallet: KeyWallet, address: str) -> dict:
        return self.tx_handler.call(self.address, "getStake", {"address": str(address)}, wallet.get_address())

    def get_prep(self, wallet: KeyWallet, address: str) -> dict:
        return self.tx_handler.call(self.address, "getPRep", {"address": str(address)}, wallet.get_address())

    def get_balance(self, wallet: KeyWallet) -> Balance:
        try:
            result = self.tx_handler.call(self.address, "getBalance", {}, wallet.get_address())
            return Balance(int(result, 16), True)
        except (IconServiceBaseException, TypeError, ValueError) as e:
            logger.warning(f"getBalance of {self.address} failed: {e}")
            return Balance(None, False)
