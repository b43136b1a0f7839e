"""VipuDev.AI backend."""
