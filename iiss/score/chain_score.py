from iconsdk.wallet.wallet import KeyWallet

from iiss.constants import *
from iiss.transaction_handler import TransactionHandler


class ChainScore:
    """
    Facade of the system score. Invokes return the transaction result, queries the raw call result.
    """

    def __init__(self, tx_handler: TransactionHandler, address: str = TARGET_SCORES["chain"]):
        self.tx_handler = tx_handler
        self.address = address

    def _invoke(self, wallet: KeyWallet, method: str, params: dict = None, value: int = 0) -> dict:
        return self.tx_handler.invoke_and_wait(wallet, self.address, method, params, value)

    def _call(self, method: str, params: dict = None):
        return self.tx_handler.call(self.address, method, params)

    # -----------------------------------------------------------------------
    # ------------------------------- PRep ----------------------------------
    # -----------------------------------------------------------------------

    def registerPRep(self, wallet: KeyWallet, name: str, email: str, country: str, city: str, website: str,
                     details: str, p2pEndpoint: str, nodeAddress: str, value: int = PREP_REGISTRATION_FEE) -> dict:
        paras = {
            "name": name,
            "email": email,
            "country": country,
            "city": city,
            "website": website,
            "details": details,
            "p2pEndpoint": p2pEndpoint,
            "nodeAddress": nodeAddress
        }
        return self._invoke(wallet, "registerPRep", paras, value)

    def unregisterPRep(self, wallet: KeyWallet) -> dict:
        return self._invoke(wallet, "unregisterPRep")

    def setBonderList(self, wallet: KeyWallet, bonder_list: list) -> dict:
        return self._invoke(wallet, "setBonderList", {"bonderList": [str(a) for a in bonder_list]})

    def getBonderList(self, address: str) -> dict:
        return self._call("getBonderList", {"address": address})

    # -----------------------------------------------------------------------
    # ------------------------- delegation, bond ----------------------------
    # -----------------------------------------------------------------------

    def getDelegation(self, address: str) -> dict:
        return self._call("getDelegation", {"address": address})

    def getBond(self, address: str) -> dict:
        return self._call("getBond", {"address": address})

    # -----------------------------------------------------------------------
    # -------------------------------- fee ----------------------------------
    # -----------------------------------------------------------------------

    def getStepPrice(self) -> int:
        return int(self._call("getStepPrice"), 16)

    def getStepCosts(self) -> dict:
        return {k: int(v, 16) for k, v in self._call("getStepCosts").items()}

    def getMaxStepLimit(self, context_type: str) -> int:
        return int(self._call("getMaxStepLimit", {"contextType": context_type}), 16)
