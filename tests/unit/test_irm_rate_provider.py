"""Unit tests for IrmRateProvider."""

import pytest
from unittest.mock import AsyncMock

from web3 import AsyncWeb3

from src.core.constants import ZERO_ADDRESS
from src.data.sources.irm_rate_provider import IrmRateProvider
from src.protocols.morpho.abis import INTEREST_RATE_MODEL_ABI


class TestIrmRateProvider:
    """Tests for IrmRateProvider."""

    @pytest.fixture
    def provider(self, mock_web3, settings):
        return IrmRateProvider(mock_web3, settings)

    def test_contract_bound_to_configured_irm(self, provider, mock_web3, settings):
        mock_web3.eth.contract.assert_called_once_with(
            address=AsyncWeb3.to_checksum_address(settings.irm_address),
            abi=INTEREST_RATE_MODEL_ABI,
        )

    @pytest.mark.asyncio
    async def test_get_borrow_rate(self, provider, mock_web3, sample_market):
        rate = await provider.get_borrow_rate(sample_market)

        assert rate == "1268391679"
        borrow_rate_view = mock_web3.eth.contract.return_value.functions.borrowRateView
        borrow_rate_view.assert_called_once()
        market_params, market_struct = borrow_rate_view.call_args.args
        assert market_params == (
            AsyncWeb3.to_checksum_address(sample_market["loanAsset"]["address"]),
            AsyncWeb3.to_checksum_address(sample_market["collateralAsset"]["address"]),
            AsyncWeb3.to_checksum_address(sample_market["oracleAddress"]),
            AsyncWeb3.to_checksum_address(sample_market["irmAddress"]),
            860000000000000000,
        )
        assert market_struct == (1000000, 1000000000000, 500000, 500000000000, 1700000000, 0)

    @pytest.mark.asyncio
    async def test_zero_address_without_collateral(self, provider, mock_web3, idle_market):
        await provider.get_borrow_rate(idle_market)

        borrow_rate_view = mock_web3.eth.contract.return_value.functions.borrowRateView
        market_params, _ = borrow_rate_view.call_args.args
        assert market_params[1] == ZERO_ADDRESS

    @pytest.mark.asyncio
    async def test_lowercase_addresses_are_checksummed(self, provider, mock_web3, sample_market):
        checksummed = AsyncWeb3.to_checksum_address(sample_market["loanAsset"]["address"])
        sample_market["loanAsset"]["address"] = checksummed.lower()
        await provider.get_borrow_rate(sample_market)

        borrow_rate_view = mock_web3.eth.contract.return_value.functions.borrowRateView
        market_params, _ = borrow_rate_view.call_args.args
        assert market_params[0] == checksummed

    @pytest.mark.asyncio
    async def test_call_failure_returns_none(self, provider, mock_web3, sample_market):
        borrow_rate_view = mock_web3.eth.contract.return_value.functions.borrowRateView
        borrow_rate_view.return_value.call = AsyncMock(side_effect=Exception("execution reverted"))

        assert await provider.get_borrow_rate(sample_market) is None

    @pytest.mark.asyncio
    async def test_invalid_address_returns_none(self, provider, mock_web3, sample_market):
        sample_market["oracleAddress"] = "0xnot-an-address"

        assert await provider.get_borrow_rate(sample_market) is None
        mock_web3.eth.contract.return_value.functions.borrowRateView.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_state_returns_none(self, provider, sample_market):
        sample_market["state"] = None
        assert await provider.get_borrow_rate(sample_market) is None

    @pytest.mark.asyncio
    async def test_missing_loan_asset_returns_none(self, provider, sample_market):
        del sample_market["loanAsset"]
        assert await provider.get_borrow_rate(sample_market) is None
