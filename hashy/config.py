"""
Hashy Configuration
===================
Environment variables read at import time to seed the hashing policy.
"""

import os

DEFAULT_ALGORITHM = os.getenv("HASHY_DEFAULT_ALGORITHM", "bcrypt")

BCRYPT_COST = int(os.getenv("HASHY_BCRYPT_COST", "10"))

ARGON2_TIME_COST = int(os.getenv("HASHY_ARGON2_TIME_COST", "3"))
ARGON2_MEMORY_COST = int(os.getenv("HASHY_ARGON2_MEMORY_COST", "65536"))
ARGON2_PARALLELISM = int(os.getenv("HASHY_ARGON2_PARALLELISM", "4"))
