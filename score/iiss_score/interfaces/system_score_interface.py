from iconservice import *


class InterfaceSystemScore(InterfaceScore):
    @interface
    def setStake(self, value: int) -> None: pass

    @interface
    def getStake(self, address: Address) -> dict: pass

    @interface
    def setDelegation(self, delegations: list = None): pass

    @interface
    def setBond(self, bonds: list = None): pass

    @interface
    def getPRep(self, address: Address) -> dict: pass
