from enum import Enum

class Tier(str, Enum):
    DIAMOND = "Diamond"    # >= 90
    GOLD = "Gold"          # 80-89
    SILVER = "Silver"      # 70-79
    BRONZE = "Bronze"      # 60-69
    WARNING = "Warning"    # 50-59
    RED_ZONE = "RedZone"   # < 50
