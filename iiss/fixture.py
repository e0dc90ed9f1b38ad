import logging
import pprint as pp
from collections import namedtuple

from iconsdk.exception import IconServiceBaseException
from iconsdk.icon_service import IconService
from iconsdk.providers.http_provider import HTTPProvider
from iconsdk.wallet.wallet import KeyWallet

from iiss.constants import *
from iiss.env import Env, check_node
from iiss.exceptions import SetupFailure, ResultTimeoutException, TransactionFailureException
from iiss.score.chain_score import ChainScore
from iiss.score.gov_score import GovScore
from iiss.score.iiss_score import IISSScore
from iiss.transaction_handler import TransactionHandler

logger = logging.getLogger(__name__)

Fixture = namedtuple("Fixture", ["tx_handler", "chain_score", "gov_score", "fee", "governor", "wallets", "score",
                                 "prep"])


def required_funding(num_wallets: int, balance: int = TEST_WALLET_BALANCE) -> int:
    """
    Total ICX (in loop) the governor hands out to the test wallets.
    """
    if balance < MIN_WALLET_BALANCE:
        raise SetupFailure(f"Wallet balance {balance} is below the minimum of {MIN_WALLET_BALANCE}")
    return num_wallets * balance


def fund_wallets(tx_handler: TransactionHandler, governor: KeyWallet, num_wallets: int,
                 balance: int = TEST_WALLET_BALANCE) -> tuple:
    required_funding(num_wallets, balance)
    wallets = []
    for _ in range(num_wallets):
        wallet = KeyWallet.create()
        tx_result = tx_handler.transfer_and_wait(governor, wallet.get_address(), balance)
        if tx_result.get("status") != 1:
            raise SetupFailure(f"Funding {wallet.get_address()} failed:\n{pp.pformat(tx_result)}")
        wallets.append(wallet)
    return tuple(wallets)


def register_bond_target(chain_score: ChainScore, wallet: KeyWallet, score_address: str) -> None:
    """
    Registers wallet as PRep which accepts bonds from the SCORE.
    """
    tx_result = chain_score.registerPRep(wallet, nodeAddress=wallet.get_address(), **DEFAULT_PREP_PROFILE)
    if tx_result.get("status") != 1:
        raise SetupFailure(f"registerPRep for {wallet.get_address()} failed:\n{pp.pformat(tx_result)}")

    tx_result = chain_score.setBonderList(wallet, [score_address])
    if tx_result.get("status") != 1:
        raise SetupFailure(f"setBonderList for {wallet.get_address()} failed:\n{pp.pformat(tx_result)}")


def bootstrap(env: Env, num_wallets: int = TEST_WALLET_NUM, balance: int = TEST_WALLET_BALANCE,
              icon_service: IconService = None) -> Fixture:
    """
    Funds fresh wallets from the governor and installs the IISS SCORE from the first one.
    The last wallet becomes the PRep the SCORE bonds to.
    Any failure is fatal, nothing is retried.
    """
    if env.governor_wallet is None:
        raise SetupFailure("No governor wallet configured")
    if num_wallets < 1:
        raise SetupFailure("At least one test wallet is needed to install the SCORE")

    if icon_service is None:
        check_node(env)
        icon_service = IconService(HTTPProvider(env.api_url))
    tx_handler = TransactionHandler(icon_service, env.nid, env.result_timeout, env.poll_interval)

    try:
        chain_score = ChainScore(tx_handler)
        gov_score = GovScore(tx_handler)
        fee = gov_score.get_fee()
        tx_handler.step_limit = fee.max_step_limits.get("invoke") or tx_handler.step_limit

        wallets = fund_wallets(tx_handler, env.governor_wallet, num_wallets, balance)
        score = IISSScore.install(tx_handler, wallets[0], env.score_path)
        prep = wallets[-1]
        register_bond_target(chain_score, prep, score.get_address())
    except (IconServiceBaseException, ResultTimeoutException, TransactionFailureException) as e:
        logger.error(f"Fixture bootstrap failed: {e}")
        raise SetupFailure(f"Fixture bootstrap failed: {e}") from e

    logger.info(f"Fixture ready on {env}: {len(wallets)} wallets, SCORE {score.get_address()}")
    return Fixture(tx_handler=tx_handler,
                   chain_score=chain_score,
                   gov_score=gov_score,
                   fee=fee,
                   governor=env.governor_wallet,
                   wallets=wallets,
                   score=score,
                   prep=prep)
