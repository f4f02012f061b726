"""AMM (Automated Market Maker) math."""

from quoter.amm.base import AMM
from quoter.amm.constant_product import ConstantProduct, Reserves, constant_product

__all__ = [
    "AMM",
    "ConstantProduct",
    "Reserves",
    "constant_product",
]
