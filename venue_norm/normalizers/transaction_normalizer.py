"""
Deposit and withdrawal history normalizer.

Both histories share one entry shape. Withdrawals carry a negative amount
and pack "amount;address;fee" into the label; deposits put the plain
address there.
"""
from ..core.records import (
    Fee,
    TransactionStatus,
    TransactionType,
    UnifiedCurrency,
    UnifiedTransaction,
)
from ..utils.logging import get_logger
from .base import BaseNormalizer
from .extract import safe_float, safe_string, to_float

logger = get_logger(__name__)


def decode_label(label: str | None, separator: str = ";") -> tuple[float | None, str | None, float | None]:
    """
    Split a transaction label into (amount, address, fee).

    Only a label of exactly three parts is packed; any other label is the
    address itself.
    """
    if label is None:
        return None, None, None
    parts = label.split(separator)
    if len(parts) != 3:
        return None, label, None
    amount, address, fee = parts
    return to_float(amount), address, to_float(fee)


class TransactionNormalizer(BaseNormalizer):
    """Normalizes deposit and withdrawal history entries."""

    def normalize(self, raw: dict, currency: UnifiedCurrency | None = None) -> UnifiedTransaction:
        fields = self.config.transactions

        amount = safe_float(raw, fields.amount)
        tx_type = TransactionType.DEPOSIT.value
        if amount is not None and amount < 0:
            amount = abs(amount)
            tx_type = TransactionType.WITHDRAWAL.value

        code = self.resolve_currency(safe_string(raw, fields.currency), currency)

        label_amount, address, fee_cost = decode_label(
            safe_string(raw, fields.label), self.config.label_separator
        )
        if label_amount is not None:
            # Net amount the recipient gets, excluding the fee
            amount = label_amount

        fee = None
        if fee_cost is not None:
            fee = Fee(cost=fee_cost, currency=code)

        txid = safe_string(raw, fields.txid)
        status = TransactionStatus.OK.value
        if txid == self.config.canceled_txid_marker:
            txid = None
            status = TransactionStatus.CANCELED.value

        if amount is None:
            logger.debug(f"Transaction {safe_string(raw, fields.id)} has no amount")

        return UnifiedTransaction(
            id=safe_string(raw, fields.id),
            timestamp=self.parse_time(safe_string(raw, fields.timestamp)),
            currency=code,
            amount=amount,
            address=address,
            tag=None,
            status=status,
            type=tx_type,
            txid=txid,
            fee=fee,
            raw=raw,
        )
