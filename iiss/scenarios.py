import logging
import pprint as pp

from iconsdk.wallet.wallet import KeyWallet

from iiss.constants import *
from iiss.fixture import Fixture
from iiss.score.iiss_score import Balance
from iiss.utils import expect_success, scenario

logger = logging.getLogger(__name__)


def _addresses(entries: list) -> list:
    return [e["address"] for e in entries]


def register_prep_and_set_bonder_list(fixture: Fixture, wallet: KeyWallet, profile: dict = None,
                                      node_address: str = None, value: int = PREP_REGISTRATION_FEE,
                                      bonder_list: list = None) -> tuple:
    """
    Registers wallet as PRep, then allows the addresses of bonder_list to bond on it.
    The bonder list is only touched if the registration succeeded.
    :return: both transaction results
    """
    profile = DEFAULT_PREP_PROFILE if profile is None else profile
    node_address = wallet.get_address() if node_address is None else node_address
    bonder_list = [fixture.score.get_address()] if bonder_list is None else bonder_list

    with scenario("registerPRepAndSetBonderList"):
        register_result = expect_success(fixture.chain_score.registerPRep, wallet, nodeAddress=node_address,
                                         value=value, **profile)
        bonder_result = expect_success(fixture.chain_score.setBonderList, wallet, bonder_list)

        bonders = fixture.chain_score.getBonderList(wallet.get_address()).get("bonderList", [])
        missing = [b for b in bonder_list if str(b) not in bonders]
        if missing:
            raise AssertionError(f"{missing} not in bonder list of {wallet.get_address()}: {bonders}")
    return register_result, bonder_result


def set_stake(fixture: Fixture, wallet: KeyWallet, amount: str) -> dict:
    with scenario("setStake"):
        return expect_success(fixture.score.set_stake, wallet, amount)


def set_delegation(fixture: Fixture, wallet: KeyWallet, address: str, amount: str) -> dict:
    with scenario("setDelegation"):
        return expect_success(fixture.score.set_delegation, wallet, address, amount)


def set_bond(fixture: Fixture, wallet: KeyWallet, address: str, amount: str) -> dict:
    with scenario("setBond"):
        return expect_success(fixture.score.set_bond, wallet, address, amount)


def stake_delegate_and_bond(fixture: Fixture, wallet: KeyWallet, address: str, stake: str, delegation: str,
                            bond: str) -> tuple:
    """
    Stakes with the SCORE, then delegates and bonds part of the stake to the PRep at address.
    The PRep must accept the SCORE as bonder.
    :return: the three transaction results
    """
    results = (set_stake(fixture, wallet, stake),
               set_delegation(fixture, wallet, address, delegation),
               set_bond(fixture, wallet, address, bond))

    score_address = fixture.score.get_address()
    delegations = fixture.chain_score.getDelegation(score_address)
    if address not in _addresses(delegations.get("delegations", [])):
        raise AssertionError(f"{score_address} does not delegate to {address}:\n{pp.pformat(delegations)}")
    bonds = fixture.chain_score.getBond(score_address)
    if address not in _addresses(bonds.get("bonds", [])):
        raise AssertionError(f"{score_address} does not bond to {address}:\n{pp.pformat(bonds)}")
    return results


def get_stake(fixture: Fixture, wallet: KeyWallet, address: str) -> dict:
    with scenario("getStake"):
        stake = fixture.score.get_stake(wallet, address)
        logger.info(pp.pformat(stake))
    return stake


def get_balance(fixture: Fixture, wallet: KeyWallet) -> Balance:
    with scenario("getBalance"):
        balance = fixture.score.get_balance(wallet)
        if not balance.success:
            raise AssertionError(f"Balance of {fixture.score.get_address()} could not be read")
        logger.info(f"balance: {balance.value}")
    return balance


def get_prep(fixture: Fixture, wallet: KeyWallet, address: str) -> dict:
    with scenario("getPRep"):
        prep = fixture.score.get_prep(wallet, address)
        logger.info(pp.pformat(prep))
    return prep


def unregister_prep(fixture: Fixture, wallet: KeyWallet) -> dict:
    with scenario("unregisterPRep"):
        return expect_success(fixture.chain_score.unregisterPRep, wallet)
