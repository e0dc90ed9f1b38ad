from iconservice import *
from .consts import *
from .interfaces.system_score_interface import InterfaceSystemScore


class IISSScore(IconScoreBase):
    """
    Stakes, delegates and bonds with its own balance through the system SCORE.
    Used by the integration tests as a bonder of a PRep.
    """

    # ================================================
    #  Event logs
    # ================================================
    @eventlog(indexed=0)
    def StakeSet(self, _value: int):
        pass

    @eventlog(indexed=1)
    def DelegationSet(self, _address: Address, _value: int):
        pass

    @eventlog(indexed=1)
    def BondSet(self, _address: Address, _value: int):
        pass

    # ================================================
    #  Initialization
    # ================================================
    def __init__(self, db: IconScoreDatabase) -> None:
        super().__init__(db)
        self._system_score = IconScoreBase.create_interface_score(SYSTEM_SCORE, InterfaceSystemScore)

    def on_install(self) -> None:
        super().on_install()

    def on_update(self) -> None:
        super().on_update()

    @payable
    def fallback(self):
        pass

    # ================================================
    #  External methods
    # ================================================
    @payable
    @external
    def setStake(self, value: int) -> None:
        if value < 0:
            revert(f"{TAG}: Stake cannot be negative")
        self._system_score.setStake(value)
        self.StakeSet(value)

    @external
    def setDelegation(self, address: Address, value: int) -> None:
        self._system_score.setDelegation([{"address": address, "value": value}])
        self.DelegationSet(address, value)

    @external
    def setBond(self, address: Address, value: int) -> None:
        self._system_score.setBond([{"address": address, "value": value}])
        self.BondSet(address, value)

    @external(readonly=True)
    def getStake(self, address: Address) -> dict:
        return self._system_score.getStake(address)

    @external(readonly=True)
    def getPRep(self, address: Address) -> dict:
        return self._system_score.getPRep(address)

    @external(readonly=True)
    def getBalance(self) -> int:
        return self.icx.get_balance(self.address)
