CHAIN_SCORE_ADDRESS = 'cx0000000000000000000000000000000000000000'
GOV_SCORE_ADDRESS = 'cx0000000000000000000000000000000000000001'

TARGET_SCORES = {
    "chain": CHAIN_SCORE_ADDRESS,
    "gov": GOV_SCORE_ADDRESS,
}

ICX = 10 ** 18

# deploy(100) + deposit(5000)
DEPLOY_COST = 100 * ICX
DEPOSIT_COST = 5000 * ICX
MIN_WALLET_BALANCE = DEPLOY_COST + DEPOSIT_COST

TEST_WALLET_NUM = 3
TEST_WALLET_BALANCE = 30000 * ICX

PREP_REGISTRATION_FEE = 2000 * ICX

DEFAULT_STEP_LIMIT = 2500000000
DEPLOY_STEP_LIMIT = 10000000000

DEFAULT_PREP_PROFILE = {
    "name": "ABC",
    "email": "abc@example.com",
    "country": "KOR",
    "city": "Seoul",
    "website": "https://abc.example.com/",
    "details": "https://abc.example.com/details/",
    "p2pEndpoint": "123.45.67.89:7100",
}
