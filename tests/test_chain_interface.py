import pytest
from eth_utils import to_checksum_address
from web3 import Web3
from web3.exceptions import BadFunctionCallOutput, ContractLogicError

from nethermind.trailblazer.abis import load_abi
from nethermind.trailblazer.chain_interface import Web3ChainReader
from nethermind.trailblazer.exceptions import ChainStateError
from nethermind.trailblazer.types.evm import BlockInfo

TOKEN_ADDRESS = "0xa51894664a773981c6c112c43ce576f315d5b1b6"
TRANSFER_TOPIC = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"


def raw_log(block_number: int, log_index: int) -> dict:
    return {
        "address": TOKEN_ADDRESS,
        "topics": [TRANSFER_TOPIC, "0x" + "00" * 31 + "01"],
        "data": "0x",
        "blockNumber": hex(block_number),
        "transactionHash": "0x" + "ab" * 32,
        "logIndex": hex(log_index),
    }


@pytest.fixture(name="mock_reader")
def fixture_mock_reader(mocker):
    return Web3ChainReader(mocker.MagicMock())


def test_from_rpc_url():
    reader = Web3ChainReader.from_rpc_url("http://localhost:8545")
    assert isinstance(reader.w3, Web3)


def test_block_at(mock_reader):
    mock_reader.w3.eth.get_block.return_value = {"number": 400000, "timestamp": 1_718_000_000, "hash": b"\x00"}

    assert mock_reader.block_at(400000) == BlockInfo(number=400000, timestamp=1_718_000_000)
    mock_reader.w3.eth.get_block.assert_called_once_with(400000)


class TestCallContract:
    def test_call_at_block(self, mock_reader):
        contract = mock_reader.w3.eth.contract.return_value
        contract.functions.decimals.return_value.call.return_value = 6

        assert mock_reader.call_contract(TOKEN_ADDRESS, "erc20", "decimals", [], 1234) == 6

        mock_reader.w3.eth.contract.assert_called_once_with(
            address=to_checksum_address(TOKEN_ADDRESS), abi=load_abi("erc20")
        )
        contract.functions.decimals.assert_called_once_with()
        contract.functions.decimals.return_value.call.assert_called_once_with(block_identifier=1234)

    def test_call_passes_args(self, mock_reader):
        contract = mock_reader.w3.eth.contract.return_value
        contract.functions.poolMetas.return_value.call.return_value = ("0x01", "0x02", 3000)

        mock_reader.call_contract(TOKEN_ADDRESS, "izumi_liquidity_manager", "poolMetas", [7], 99)

        contract.functions.poolMetas.assert_called_once_with(7)

    @pytest.mark.parametrize(
        "error",
        [ContractLogicError("execution reverted"), BadFunctionCallOutput("Could not decode contract function")],
    )
    def test_failed_calls_raise_chain_state_error(self, mock_reader, error):
        contract = mock_reader.w3.eth.contract.return_value
        contract.functions.decimals.return_value.call.side_effect = error

        with pytest.raises(ChainStateError, match="decimals") as exc_info:
            mock_reader.call_contract(TOKEN_ADDRESS, "erc20", "decimals", [], 1234)

        assert exc_info.value.__cause__ is error

    def test_other_errors_propagate(self, mock_reader):
        contract = mock_reader.w3.eth.contract.return_value
        contract.functions.decimals.return_value.call.side_effect = ConnectionError("connection refused")

        with pytest.raises(ConnectionError):
            mock_reader.call_contract(TOKEN_ADDRESS, "erc20", "decimals", [], 1234)


def test_transaction_logs(mock_reader):
    tx_hash = b"\xab" * 32
    mock_reader.w3.eth.get_transaction_receipt.return_value = {"logs": [raw_log(10, 0), raw_log(10, 1)]}

    logs = mock_reader.transaction_logs(tx_hash)

    mock_reader.w3.eth.get_transaction_receipt.assert_called_once_with(tx_hash)
    assert [log.log_index for log in logs] == [0, 1]
    assert all(log.address == to_checksum_address(TOKEN_ADDRESS) for log in logs)


def test_get_logs(mock_reader):
    mock_reader.w3.eth.get_logs.return_value = [raw_log(100, 0), raw_log(100, 4), raw_log(105, 1)]
    address = to_checksum_address(TOKEN_ADDRESS)

    logs = mock_reader.get_logs([address], 100, "latest")

    mock_reader.w3.eth.get_logs.assert_called_once_with(
        {"address": [address], "fromBlock": 100, "toBlock": "latest"}
    )
    assert [(log.block_number, log.log_index) for log in logs] == [(100, 0), (100, 4), (105, 1)]
    assert logs[0].topics[0].hex() == TRANSFER_TOPIC[2:]
