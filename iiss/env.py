import logging
import os

import requests
from iconsdk.wallet.wallet import KeyWallet

from iiss.exceptions import SetupFailure

# Enable logging
logging.basicConfig(format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                    level=os.getenv("LOG_LEVEL", "INFO"))
logger = logging.getLogger(__name__)

NETWORKS = {
    "LOCAL": {"url": "http://127.0.0.1:9082", "nid": 3},
    "TESTNET": {"url": "https://lisbon.net.solidwallet.io", "nid": 2},
}

# Paths
root_path = os.sep.join([os.path.dirname(os.path.realpath(__file__)), os.path.pardir])
default_score_path = os.path.abspath(os.sep.join([root_path, 'score', 'iiss_score']))


class Env:
    """
    Everything the harness needs to know about the node it talks to.
    """

    def __init__(self, node_url: str, nid: int, api_version: str = "3", channel: str = "",
                 governor_wallet: KeyWallet = None, result_timeout: float = 30, poll_interval: float = 1,
                 score_path: str = default_score_path):
        self.node_url = node_url.rstrip("/")
        self.nid = nid
        self.api_version = api_version
        self.channel = channel
        self.governor_wallet = governor_wallet
        self.result_timeout = result_timeout
        self.poll_interval = poll_interval
        self.score_path = score_path

    @property
    def api_url(self) -> str:
        url = f"{self.node_url}/api/v{self.api_version}"
        if self.channel:
            url += f"/{self.channel}"
        return url

    def __repr__(self):
        return f"Env(api_url={self.api_url}, nid={self.nid})"


def load_governor_wallet(environ) -> KeyWallet:
    if environ.get("GOVERNOR_PRIVATE_KEY"):
        return KeyWallet.load(bytes.fromhex(environ["GOVERNOR_PRIVATE_KEY"]))
    if environ.get("GOVERNOR_KEYSTORE"):
        return KeyWallet.load(environ["GOVERNOR_KEYSTORE"], environ.get("GOVERNOR_PASSWORD", ""))
    return None


def load_env(environ=None) -> Env:
    environ = os.environ if environ is None else environ

    network = environ.get("ICON_NETWORK", "LOCAL")
    if network not in NETWORKS:
        logger.error("No valid network is specified!")
        raise SetupFailure(f"Unknown network: {network}")
    preset = NETWORKS[network]

    return Env(node_url=environ.get("ICON_NODE_URL", preset["url"]),
               nid=int(environ.get("ICON_NID", preset["nid"])),
               api_version=environ.get("ICON_API_VERSION", "3"),
               channel=environ.get("ICON_CHANNEL", ""),
               governor_wallet=load_governor_wallet(environ),
               result_timeout=float(environ.get("TX_RESULT_TIMEOUT", 30)),
               poll_interval=float(environ.get("TX_POLL_INTERVAL", 1)),
               score_path=environ.get("IISS_SCORE_PATH", default_score_path))


def check_node(env: Env, timeout: float = 5) -> None:
    """
    Asks the node for its last block, raises SetupFailure if it does not answer.
    """
    payload = {"jsonrpc": "2.0", "method": "icx_getLastBlock", "id": 1}
    try:
        response = requests.post(env.api_url, json=payload, timeout=timeout)
    except requests.RequestException as e:
        raise SetupFailure(f"Node {env.api_url} is not reachable: {e}") from e

    if response.status_code != 200:
        raise SetupFailure("Error while network request.\nReceived status code: " +
                           str(response.status_code) + '\nReceived response: ' + response.text)
