"""Sample BAI2 documents shared by the test suite."""

# Eight-record sample: one group, one account, one transaction with a
# continuation. Trailer totals are consistent with the body.
SAMPLE_LINES = (
    "01,SENDR1,RECVR1,210616,1700,01,80,10,2/",
    "02,RECVR1,SENDR1,1,210616,1700,GBP,2/",
    "03,0975312468,,010,500000,,,/",
    "16,399,10000,0,BANKREF1,CUSTREF1,INVOICE 1234/",
    "88,PAID IN FULL/",
    "49,510000,4/",
    "98,510000,1,6/",
    "99,510000,1,8/",
)

FILE_HEADER = "01,SENDR1,RECVR1,210616,1700,01,,,2/"
GROUP_HEADER = "02,RECVR1,SENDR1,1,210616,,USD,/"


def build_file(*body: str, header: str = FILE_HEADER) -> list[str]:
    """Wrap body records in a file header and trailer."""
    return [header, *body, "99,0,1,0/"]


def build_group(*accounts: str, header: str = GROUP_HEADER) -> list[str]:
    """Wrap account records in a group header and trailer."""
    return [header, *accounts, "98,0,1,0/"]


def single_account(*records: str, group_header: str = GROUP_HEADER) -> list[str]:
    """A complete file holding one group with one account made of ``records``."""
    return build_file(*build_group(*records, "49,0,0/", header=group_header))
