"""Base class for AMM swap math."""

from abc import ABC, abstractmethod


class AMM(ABC):
    """Abstract swap math over a two-asset pool.

    Reserves are always passed oriented to the trade: ``reserve_in`` is the
    pool balance of the asset the trader pays, ``reserve_out`` the balance
    of the asset the trader receives.
    """

    @abstractmethod
    def get_amount_out(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
    ) -> int:
        """Calculate output amount for an exact input.

        Args:
            amount_in: Input token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool

        Returns:
            Output token amount
        """
        ...

    @abstractmethod
    def get_amount_in(
        self,
        amount_out: int,
        reserve_in: int,
        reserve_out: int,
    ) -> int:
        """Calculate required input for an exact output.

        Args:
            amount_out: Desired output token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool

        Returns:
            Required input token amount
        """
        ...
