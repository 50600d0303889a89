"""Shared OFX fixtures."""

import pytest

from ofx_builder import with_header


CHECKING_STATEMENT = """<OFX>
<BANKMSGSRSV1>
<STMTTRNRS>
<STMTRS>
<CURDEF>USD
<BANKACCTFROM>
<BANKID>USA
<ACCTID>9351720470
<ACCTTYPE>CHECKING
</BANKACCTFROM>
<BANKTRANLIST>
<STMTTRN>
<TRNTYPE>DEBIT
<DTPOSTED>20250601000000.000[-08:PST]
<TRNAMT>-100.00
<FITID>TXN1
<NAME>Withdrawal ATM
<MEMO>ATM Withdrawal
</STMTTRN>
<STMTTRN>
<TRNTYPE>CREDIT
<DTPOSTED>20250602000000.000[-08:PST]
<TRNAMT>6,291.22
<FITID>TXN2
<NAME>ACH Deposit MICROSOFT   EDIPAYME
<MEMO>Direct Deposit
</STMTTRN>
</BANKTRANLIST>
</STMTRS>
</STMTTRNRS>
</BANKMSGSRSV1>
</OFX>
"""


@pytest.fixture
def checking_ofx() -> str:
    """A single checking statement with one debit and one credit."""
    return with_header(CHECKING_STATEMENT)
