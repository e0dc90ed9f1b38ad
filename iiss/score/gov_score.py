from collections import namedtuple

from iiss.constants import *
from iiss.score.chain_score import ChainScore
from iiss.transaction_handler import TransactionHandler

Fee = namedtuple("Fee", ["step_price", "step_costs", "max_step_limits"])

CONTEXT_TYPES = ("invoke", "query")


class GovScore:
    """
    Governance facade. The fee schedule moved into the system SCORE on goloop based networks,
    so it is read through ChainScore; address is the governance SCORE itself.
    """

    def __init__(self, tx_handler: TransactionHandler, address: str = TARGET_SCORES["gov"]):
        self.tx_handler = tx_handler
        self.address = address
        self.chain_score = ChainScore(tx_handler)

    def get_fee(self) -> Fee:
        return Fee(step_price=self.chain_score.getStepPrice(),
                   step_costs=self.chain_score.getStepCosts(),
                   max_step_limits={t: self.chain_score.getMaxStepLimit(t) for t in CONTEXT_TYPES})
