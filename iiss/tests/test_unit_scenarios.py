import unittest
from unittest.mock import MagicMock

from iconsdk.exception import JSONRPCException
from iconsdk.wallet.wallet import KeyWallet

from iiss import scenarios
from iiss.constants import PREP_REGISTRATION_FEE
from iiss.exceptions import ResultTimeoutException
from iiss.fixture import Fixture
from iiss.score.iiss_score import Balance, IISSScore

SCORE_ADDRESS = "cx" + "d" * 40
SUCCESS = {"status": 1}
FAILURE = {"status": 0, "failure": {"code": "0x7d64", "message": "PRep already registered"}}


class TestScenarios(unittest.TestCase):

    def setUp(self):
        self.wallets = tuple(KeyWallet.create() for _ in range(3))
        self.chain_score = MagicMock()
        self.score = MagicMock()
        self.score.get_address.return_value = SCORE_ADDRESS
        self.fixture = Fixture(tx_handler=MagicMock(),
                               chain_score=self.chain_score,
                               gov_score=MagicMock(),
                               fee=None,
                               governor=KeyWallet.create(),
                               wallets=self.wallets,
                               score=self.score,
                               prep=self.wallets[2])

    def test_register_prep_and_set_bonder_list(self):
        self.chain_score.registerPRep.return_value = SUCCESS
        self.chain_score.setBonderList.return_value = SUCCESS
        self.chain_score.getBonderList.return_value = {"bonderList": [SCORE_ADDRESS]}
        prep = self.wallets[1]

        results = scenarios.register_prep_and_set_bonder_list(self.fixture, prep)

        self.assertEqual(results, (SUCCESS, SUCCESS))
        kwargs = self.chain_score.registerPRep.call_args[1]
        self.assertEqual(kwargs["nodeAddress"], prep.get_address())
        self.assertEqual(kwargs["value"], PREP_REGISTRATION_FEE)
        self.assertEqual(kwargs["name"], "ABC")
        self.assertEqual(kwargs["p2pEndpoint"], "123.45.67.89:7100")
        self.chain_score.setBonderList.assert_called_once_with(prep, [SCORE_ADDRESS])

    def test_bonder_list_not_applied(self):
        self.chain_score.registerPRep.return_value = SUCCESS
        self.chain_score.setBonderList.return_value = SUCCESS
        self.chain_score.getBonderList.return_value = {"bonderList": []}
        with self.assertRaises(AssertionError) as cm:
            scenarios.register_prep_and_set_bonder_list(self.fixture, self.wallets[1])
        self.assertIn(SCORE_ADDRESS, str(cm.exception))

    def test_bonder_list_needs_registration(self):
        self.chain_score.registerPRep.return_value = FAILURE
        with self.assertRaises(AssertionError) as cm:
            scenarios.register_prep_and_set_bonder_list(self.fixture, self.wallets[1])
        self.assertIn("PRep already registered", str(cm.exception))
        self.chain_score.setBonderList.assert_not_called()

    def test_stake_delegate_bond(self):
        self.score.set_stake.return_value = SUCCESS
        self.score.set_delegation.return_value = SUCCESS
        self.score.set_bond.return_value = SUCCESS
        prep_address = self.wallets[1].get_address()

        self.assertEqual(scenarios.set_stake(self.fixture, self.wallets[0], "1000"), SUCCESS)
        self.assertEqual(scenarios.set_delegation(self.fixture, self.wallets[0], prep_address, "300"), SUCCESS)
        self.assertEqual(scenarios.set_bond(self.fixture, self.wallets[0], prep_address, "300"), SUCCESS)

        self.score.set_stake.assert_called_once_with(self.wallets[0], "1000")
        self.score.set_delegation.assert_called_once_with(self.wallets[0], prep_address, "300")
        self.score.set_bond.assert_called_once_with(self.wallets[0], prep_address, "300")

    def test_stake_delegate_and_bond(self):
        self.score.set_stake.return_value = SUCCESS
        self.score.set_delegation.return_value = SUCCESS
        self.score.set_bond.return_value = SUCCESS
        prep_address = self.fixture.prep.get_address()
        self.chain_score.getDelegation.return_value = {"delegations": [{"address": prep_address, "value": "0x1"}]}
        self.chain_score.getBond.return_value = {"bonds": [{"address": prep_address, "value": "0x1"}]}

        results = scenarios.stake_delegate_and_bond(self.fixture, self.wallets[0], prep_address, "1000", "300", "300")

        self.assertEqual(results, (SUCCESS, SUCCESS, SUCCESS))
        self.chain_score.getDelegation.assert_called_once_with(SCORE_ADDRESS)
        self.chain_score.getBond.assert_called_once_with(SCORE_ADDRESS)

    def test_stake_delegate_and_bond_missing_bond(self):
        self.score.set_stake.return_value = SUCCESS
        self.score.set_delegation.return_value = SUCCESS
        self.score.set_bond.return_value = SUCCESS
        prep_address = self.fixture.prep.get_address()
        self.chain_score.getDelegation.return_value = {"delegations": [{"address": prep_address, "value": "0x1"}]}
        self.chain_score.getBond.return_value = {"bonds": []}

        with self.assertRaises(AssertionError) as cm:
            scenarios.stake_delegate_and_bond(self.fixture, self.wallets[0], prep_address, "1000", "300", "300")
        self.assertIn("does not bond", str(cm.exception))

    def test_failed_transaction(self):
        self.score.set_bond.return_value = {"status": 0, "failure": {"message": "not in bonder list"}}
        with self.assertRaises(AssertionError) as cm:
            scenarios.set_bond(self.fixture, self.wallets[0], self.wallets[1].get_address(), "300")
        self.assertIn("not in bonder list", str(cm.exception))

    def test_timeout_fails_scenario(self):
        timeout = ResultTimeoutException("0x01", 30)
        self.score.set_stake.side_effect = timeout
        with self.assertRaises(AssertionError) as cm:
            scenarios.set_stake(self.fixture, self.wallets[0], "1000")
        self.assertIs(cm.exception.__cause__, timeout)

    def test_client_error_fails_scenario(self):
        self.score.set_delegation.side_effect = JSONRPCException(
            "Invalid params", JSONRPCException.RPC_INVALID_PARAMS)
        with self.assertRaises(AssertionError) as cm:
            scenarios.set_delegation(self.fixture, self.wallets[0], self.wallets[1].get_address(), "300")
        self.assertIsInstance(cm.exception.__cause__, JSONRPCException)

    def test_get_stake_idempotent(self):
        self.score.get_stake.return_value = {"stake": hex(1000), "unstakes": []}
        first = scenarios.get_stake(self.fixture, self.wallets[0], SCORE_ADDRESS)
        second = scenarios.get_stake(self.fixture, self.wallets[0], SCORE_ADDRESS)
        self.assertEqual(first, second)
        self.score.get_stake.assert_called_with(self.wallets[0], SCORE_ADDRESS)

    def test_get_prep_idempotent(self):
        self.score.get_prep.return_value = {"name": "ABC", "status": "0x0"}
        address = self.wallets[1].get_address()
        first = scenarios.get_prep(self.fixture, self.wallets[1], address)
        second = scenarios.get_prep(self.fixture, self.wallets[1], address)
        self.assertEqual(first, second)

    def test_get_balance(self):
        self.score.get_balance.return_value = Balance(5, True)
        self.assertEqual(scenarios.get_balance(self.fixture, self.wallets[0]), Balance(5, True))

    def test_get_balance_failure(self):
        self.score.get_balance.return_value = Balance(None, False)
        self.assertRaises(AssertionError, scenarios.get_balance, self.fixture, self.wallets[0])

    def test_get_balance_call_error(self):
        tx_handler = MagicMock()
        tx_handler.call.side_effect = JSONRPCException("Method not found", JSONRPCException.RPC_METHOD_NOT_FOUND)
        fixture = self.fixture._replace(score=IISSScore(tx_handler, SCORE_ADDRESS))
        self.assertRaises(AssertionError, scenarios.get_balance, fixture, self.wallets[0])

    def test_get_balance_not_hex(self):
        tx_handler = MagicMock()
        tx_handler.call.return_value = "zz"
        fixture = self.fixture._replace(score=IISSScore(tx_handler, SCORE_ADDRESS))
        self.assertRaises(AssertionError, scenarios.get_balance, fixture, self.wallets[0])

    def test_unregister_prep(self):
        self.chain_score.unregisterPRep.return_value = SUCCESS
        self.assertEqual(scenarios.unregister_prep(self.fixture, self.wallets[1]), SUCCESS)
        self.chain_score.unregisterPRep.assert_called_once_with(self.wallets[1])


if __name__ == '__main__':
    unittest.main()
