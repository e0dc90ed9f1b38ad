from iconservice import *

# ================================================
#  Consts
# ================================================
TAG = 'IISSScore'
VERSION = '0.1.0'
SYSTEM_SCORE = Address.from_string('cx0000000000000000000000000000000000000000')
