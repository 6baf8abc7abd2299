"""
bai2_ingestion.domain.transaction_codes -- BAI2 transaction type code table.

Maps the 3-digit type code of a 16 (transaction detail) record to a
direction and a category. Resolution is total: proprietary ranges map to
CUSTOM, anything else to UNCLASSIFIED, and the raw code is always kept.

Architecture: bai2_ingestion/domain. ZERO I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TransactionDirection(str, Enum):
    """Which side of the account a transaction lands on."""

    CREDIT = "credit"
    DEBIT = "debit"
    UNCLASSIFIED = "unclassified"


class TransactionCategory(str, Enum):
    """Standard BAI2 detail categories plus the fallback variants."""

    ACCOUNT_ANALYSIS_FEE = "account_analysis_fee"
    ACCOUNT_HOLDER_INITIATED_ACH_DEBIT = "account_holder_initiated_ach_debit"
    ACH_CONCENTRATION_CREDIT = "ach_concentration_credit"
    ACH_CONCENTRATION_DEBIT = "ach_concentration_debit"
    ACH_CREDIT_RECEIVED = "ach_credit_received"
    ACH_DEBIT_RECEIVED = "ach_debit_received"
    ACH_DISBURSEMENT_FUNDING_DEBIT = "ach_disbursement_funding_debit"
    ACH_RETURN_ITEM_OR_ADJUSTMENT_SETTLEMENT = "ach_return_item_or_adjustment_settlement"
    ACH_REVERSAL_CREDIT = "ach_reversal_credit"
    ACH_REVERSAL_DEBIT = "ach_reversal_debit"
    ACH_SETTLEMENT = "ach_settlement"
    AMOUNT_APPLIED_TO_BUYDOWN = "amount_applied_to_buydown"
    AMOUNT_APPLIED_TO_DEFERRED_INTEREST_DETAIL = "amount_applied_to_deferred_interest_detail"
    AMOUNT_APPLIED_TO_ESCROW = "amount_applied_to_escrow"
    AMOUNT_APPLIED_TO_INTEREST = "amount_applied_to_interest"
    AMOUNT_APPLIED_TO_LATE_CHARGES = "amount_applied_to_late_charges"
    AMOUNT_APPLIED_TO_MISC_FEES = "amount_applied_to_misc_fees"
    AMOUNT_APPLIED_TO_PRINCIPAL = "amount_applied_to_principal"
    AMOUNT_APPLIED_TO_SERVICE_CHARGE = "amount_applied_to_service_charge"
    ARP_DEBIT = "arp_debit"
    ATM_CREDIT = "atm_credit"
    ATM_DEBIT = "atm_debit"
    BACK_VALUE_ADJUSTMENT = "back_value_adjustment"
    BANKERS_ACCEPTANCES = "bankers_acceptances"
    BANK_ORIGINATED_DEBIT = "bank_originated_debit"
    BANK_PREPARED_DEPOSIT = "bank_prepared_deposit"
    BOND_OPERATIONS_CREDIT = "bond_operations_credit"
    BOND_OPERATIONS_DEBIT = "bond_operations_debit"
    BOOK_TRANSFER_CREDIT = "book_transfer_credit"
    BOOK_TRANSFER_DEBIT = "book_transfer_debit"
    BROKER_DEBIT = "broker_debit"
    BROKER_DEPOSIT = "broker_deposit"
    CAPITAL_CHANGE = "capital_change"
    CASH_CENTER_CREDIT = "cash_center_credit"
    CASH_CENTER_DEBIT = "cash_center_debit"
    CASH_LETTER_ADJUSTMENT = "cash_letter_adjustment"
    CASH_LETTER_CREDIT = "cash_letter_credit"
    CASH_LETTER_DEBIT = "cash_letter_debit"
    CERTIFIED_CHECK_DEBIT = "certified_check_debit"
    CHECK_DEPOSIT_PACKAGE = "check_deposit_package"
    CHECK_PAID = "check_paid"
    CHECK_POSTED_AND_RETURNED = "check_posted_and_returned"
    CHECK_REVERSAL = "check_reversal"
    CLEARING_SETTLEMENT_CREDIT = "clearing_settlement_credit"
    CLEARING_SETTLEMENT_DEBIT = "clearing_settlement_debit"
    COLLECTION_OF_DIVIDENDS = "collection_of_dividends"
    COLLECTION_OF_INTEREST_INCOME = "collection_of_interest_income"
    COMMERCIAL_DEPOSIT = "commercial_deposit"
    COMMERCIAL_PAPER = "commercial_paper"
    COMMISSION = "commission"
    COMPENSATION = "compensation"
    CORPORATE_TRADE_PAYMENT_CREDIT = "corporate_trade_payment_credit"
    CORPORATE_TRADE_PAYMENT_DEBIT = "corporate_trade_payment_debit"
    CORRESPONDENT_COLLECTION = "correspondent_collection"
    CORRESPONDENT_COLLECTION_ADJUSTMENT = "correspondent_collection_adjustment"
    CORRESPONDENT_COLLECTION_DEBIT = "correspondent_collection_debit"
    COUPON_COLLECTIONS_BANKS = "coupon_collections_banks"
    COUPON_COLLECTION_DEBIT = "coupon_collection_debit"
    CREDIT = "credit"
    CREDIT_ADJUSTMENT = "credit_adjustment"
    CREDIT_REVERSAL = "credit_reversal"
    CUMULATIVE_CHECKS_PAID = "cumulative_checks_paid"
    CUMULATIVE_CREDITS = "cumulative_credits"
    CUMULATIVE_DEBITS = "cumulative_debits"
    CUMULATIVE_ZBA_DEBITS = "cumulative_zba_debits"
    CUMULATIVE_ZBA_OR_DISBURSEMENT_CREDITS = "cumulative_zba_or_disbursement_credits"
    CURRENCY_AND_COIN_DEPOSITED = "currency_and_coin_deposited"
    CURRENCY_AND_COIN_SHIPPED = "currency_and_coin_shipped"
    CUSTOMER_PAYROLL = "customer_payroll"
    CUSTOMER_TERMINAL_INITIATED_MONEY_TRANSFER = "customer_terminal_initiated_money_transfer"
    DEBIT_ADJUSTMENT = "debit_adjustment"
    DEBIT_ANY_TYPE = "debit_any_type"
    DEBIT_REVERSAL = "debit_reversal"
    DEPOSITED_ITEM_RETURNED = "deposited_item_returned"
    DEPOSIT_CORRECTION = "deposit_correction"
    DEPOSIT_CORRECTION_DEBIT = "deposit_correction_debit"
    DEPOSIT_REVERSAL = "deposit_reversal"
    DOMESTIC_COLLECTION = "domestic_collection"
    DRAFT = "draft"
    DRAFT_DEPOSIT = "draft_deposit"
    DTC_CONCENTRATION_CREDIT = "dtc_concentration_credit"
    DTC_DEBIT = "dtc_debit"
    EDIBANX_CREDIT_RECEIVED = "edibanx_credit_received"
    EDIBANX_CREDIT_RETURN = "edibanx_credit_return"
    EDIBANX_RETURN_ITEM_DEBIT = "edibanx_return_item_debit"
    EDIBANX_SETTLEMENT_DEBIT = "edibanx_settlement_debit"
    EDI_TRANSACTION_CREDIT = "edi_transaction_credit"
    EDI_TRANSACTION_DEBIT = "edi_transaction_debit"
    FEDERAL_RESERVE_BANK_COMMERCIAL_BANK_DEBIT = "federal_reserve_bank_commercial_bank_debit"
    FEDERAL_RESERVE_BANK_LETTER_DEBIT = "federal_reserve_bank_letter_debit"
    FED_FUNDS_PURCHASED = "fed_funds_purchased"
    FED_FUNDS_SOLD = "fed_funds_sold"
    FLOAT_ADJUSTMENT = "float_adjustment"
    FOOD_STAMP_ADJUSTMENT = "food_stamp_adjustment"
    FOOD_STAMP_LETTER = "food_stamp_letter"
    FOREIGN_CHECKS_DEPOSITED = "foreign_checks_deposited"
    FOREIGN_CHECKS_PAID = "foreign_checks_paid"
    FOREIGN_CHECK_PURCHASE = "foreign_check_purchase"
    FOREIGN_COLLECTION_CREDIT = "foreign_collection_credit"
    FOREIGN_COLLECTION_DEBIT = "foreign_collection_debit"
    FOREIGN_EXCHANGE_DEBIT = "foreign_exchange_debit"
    FOREIGN_EXCHANGE_OF_CREDIT = "foreign_exchange_of_credit"
    FOREIGN_LETTER_OF_CREDIT = "foreign_letter_of_credit"
    FOREIGN_REMITTANCE_CREDIT = "foreign_remittance_credit"
    FOREIGN_REMITTANCE_DEBIT = "foreign_remittance_debit"
    FRB_CASH_LETTER_AUTO_CHARGE_ADJUSTMENT = "frb_cash_letter_auto_charge_adjustment"
    FRB_CASH_LETTER_AUTO_CHARGE_CREDIT = "frb_cash_letter_auto_charge_credit"
    FRB_CASH_LETTER_AUTO_CHARGE_DEBIT = "frb_cash_letter_auto_charge_debit"
    FRB_FINE_SORT_ADJUSTMENT = "frb_fine_sort_adjustment"
    FRB_FINE_SORT_CASH_LETTER_CREDIT = "frb_fine_sort_cash_letter_credit"
    FRB_FINE_SORT_CASH_LETTER_DEBIT = "frb_fine_sort_cash_letter_debit"
    FRB_GOVERNMENT_CHECKS_CASH_LETTER_CREDIT = "frb_government_checks_cash_letter_credit"
    FRB_GOVERNMENT_CHECKS_CASH_LETTER_DEBIT = "frb_government_checks_cash_letter_debit"
    FRB_GOVERNMENT_CHECK_ADJUSTMENT = "frb_government_check_adjustment"
    FRB_POSTAL_MONEY_ORDER_ADJUSTMENT = "frb_postal_money_order_adjustment"
    FRB_POSTAL_MONEY_ORDER_CREDIT = "frb_postal_money_order_credit"
    FRB_POSTAL_MONEY_ORDER_DEBIT = "frb_postal_money_order_debit"
    FRB_STATEMENT_RECAP = "frb_statement_recap"
    FREIGHT_PAYMENT_CREDIT = "freight_payment_credit"
    FREIGHT_PAYMENT_DEBIT = "freight_payment_debit"
    FUTURES_CREDIT = "futures_credit"
    FUTURES_DEBIT = "futures_debit"
    INCOMING_MONEY_TRANSFER = "incoming_money_transfer"
    INDIVIDUAL_ACH_RETURN_ITEM = "individual_ach_return_item"
    INDIVIDUAL_AUTOMATIC_TRANSFER_CREDIT = "individual_automatic_transfer_credit"
    INDIVIDUAL_AUTOMATIC_TRANSFER_DEBIT = "individual_automatic_transfer_debit"
    INDIVIDUAL_BACK_VALUE_CREDIT = "individual_back_value_credit"
    INDIVIDUAL_BACK_VALUE_DEBIT = "individual_back_value_debit"
    INDIVIDUAL_BANK_CARD_DEPOSIT = "individual_bank_card_deposit"
    INDIVIDUAL_COLLECTION_CREDIT = "individual_collection_credit"
    INDIVIDUAL_CONTROLLED_DISBURSING_CREDIT = "individual_controlled_disbursing_credit"
    INDIVIDUAL_CONTROLLED_DISBURSING_DEBIT = "individual_controlled_disbursing_debit"
    INDIVIDUAL_DTC_DISBURSING_CREDIT = "individual_dtc_disbursing_credit"
    INDIVIDUAL_ESCROW_CREDIT = "individual_escrow_credit"
    INDIVIDUAL_ESCROW_DEBIT = "individual_escrow_debit"
    INDIVIDUAL_INCOMING_INTERNAL_MONEY_TRANSFER = "individual_incoming_internal_money_transfer"
    INDIVIDUAL_INTERNATIONAL_MONEY_TRANSFER_CREDIT = "individual_international_money_transfer_credit"
    INDIVIDUAL_INTERNATIONAL_MONEY_TRANSFER_DEBITS = "individual_international_money_transfer_debits"
    INDIVIDUAL_INVESTMENT_PURCHASED = "individual_investment_purchased"
    INDIVIDUAL_INVESTMENT_SOLD = "individual_investment_sold"
    INDIVIDUAL_LOAN_DEPOSIT = "individual_loan_deposit"
    INDIVIDUAL_LOAN_PAYMENT = "individual_loan_payment"
    INDIVIDUAL_OUTGOING_INTERNAL_MONEY_TRANSFER = "individual_outgoing_internal_money_transfer"
    INDIVIDUAL_REJECTED_CREDIT = "individual_rejected_credit"
    INDIVIDUAL_REJECTED_DEBIT = "individual_rejected_debit"
    INTEREST_ADJUSTMENT_CREDIT = "interest_adjustment_credit"
    INTEREST_ADJUSTMENT_DEBIT = "interest_adjustment_debit"
    INTEREST_CREDIT = "interest_credit"
    INTEREST_DEBIT = "interest_debit"
    INTEREST_MATURED_PRINCIPAL_PAYMENT = "interest_matured_principal_payment"
    INTERNATIONAL_MONEY_MARKET_TRADING = "international_money_market_trading"
    ITEMIZED_CREDIT_OVER_10000 = "itemized_credit_over_10000"
    ITEMIZED_DEBIT_OVER_10000 = "itemized_debit_over_10000"
    ITEM_IN_ACH_DEPOSIT = "item_in_ach_deposit"
    ITEM_IN_ACH_DISBURSEMENT_OR_DEBIT = "item_in_ach_disbursement_or_debit"
    ITEM_IN_BROKERS_DEPOSIT = "item_in_brokers_deposit"
    ITEM_IN_DTC_DEPOSIT = "item_in_dtc_deposit"
    ITEM_IN_LOCKBOX_DEPOSIT = "item_in_lockbox_deposit"
    ITEM_IN_PAC_DEPOSIT = "item_in_pac_deposit"
    LETTER_OF_CREDIT = "letter_of_credit"
    LETTER_OF_CREDIT_DEBIT = "letter_of_credit_debit"
    LIST_POST_DEBIT = "list_post_debit"
    LOAN_PARTICIPATION = "loan_participation"
    LOCKBOX_ADJUSTMENT_CREDIT = "lockbox_adjustment_credit"
    LOCKBOX_DEBIT = "lockbox_debit"
    LOCKBOX_DEPOSIT = "lockbox_deposit"
    MATURED_FED_FUNDS_PURCHASED = "matured_fed_funds_purchased"
    MATURED_REPURCHASE_ORDER = "matured_repurchase_order"
    MATURED_REVERSE_REPURCHASE_ORDER = "matured_reverse_repurchase_order"
    MATURITY_OF_DEBT_SECURITY = "maturity_of_debt_security"
    MISCELLANEOUS_ACH_CREDIT = "miscellaneous_ach_credit"
    MISCELLANEOUS_ACH_DEBIT = "miscellaneous_ach_debit"
    MISCELLANEOUS_CREDIT = "miscellaneous_credit"
    MISCELLANEOUS_DEBIT = "miscellaneous_debit"
    MISCELLANEOUS_FEES = "miscellaneous_fees"
    MISCELLANEOUS_FEE_REFUND = "miscellaneous_fee_refund"
    MISCELLANEOUS_INTERNATIONAL_CREDIT = "miscellaneous_international_credit"
    MISCELLANEOUS_INTERNATIONAL_DEBIT = "miscellaneous_international_debit"
    MISCELLANEOUS_SECURITY_CREDIT = "miscellaneous_security_credit"
    MISCELLANEOUS_SECURITY_DEBIT = "miscellaneous_security_debit"
    MONEY_TRANSFER_ADJUSTMENT = "money_transfer_adjustment"
    OTHER_DEPOSIT = "other_deposit"
    OUTGOING_MONEY_TRANSFER = "outgoing_money_transfer"
    OVERDRAFT = "overdraft"
    OVERDRAFT_FEE = "overdraft_fee"
    PAYABLE_THROUGH_DRAFT = "payable_through_draft"
    POSTING_ERROR_CORRECTION_CREDIT = "posting_error_correction_credit"
    POSTING_ERROR_CORRECTION_DEBIT = "posting_error_correction_debit"
    PREAUTHORIZED_ACH_CREDIT = "preauthorized_ach_credit"
    PREAUTHORIZED_ACH_DEBIT = "preauthorized_ach_debit"
    PREAUTHORIZED_DRAFT_CREDIT = "preauthorized_draft_credit"
    PRINCIPAL_PAYMENTS_CREDIT = "principal_payments_credit"
    PRINCIPAL_PAYMENTS_DEBIT = "principal_payments_debit"
    PURCHASE_OF_DEBT_SECURITIES = "purchase_of_debt_securities"
    PURCHASE_OF_EQUITY_SECURITIES = "purchase_of_equity_securities"
    REGULAR_COLLECTION_DEBIT = "regular_collection_debit"
    RETURN_ITEM = "return_item"
    RETURN_ITEM_ADJUSTMENT = "return_item_adjustment"
    RETURN_ITEM_FEE = "return_item_fee"
    RE_PRESENTED_CHECK_DEPOSIT = "re_presented_check_deposit"
    SALE_OF_DEBT_SECURITY = "sale_of_debt_security"
    SALE_OF_EQUITY_SECURITY = "sale_of_equity_security"
    SAVINGS_BONDS_SALES_ADJUSTMENT = "savings_bonds_sales_adjustment"
    SAVINGS_BOND_LETTER_OR_ADJUSTMENT = "savings_bond_letter_or_adjustment"
    SECURITIES_PURCHASED = "securities_purchased"
    SECURITIES_SOLD = "securities_sold"
    SECURITY_COLLECTION_DEBIT = "security_collection_debit"
    STANDING_ORDER = "standing_order"
    SWEEP_INTEREST_INCOME = "sweep_interest_income"
    SWEEP_PRINCIPAL_BUY = "sweep_principal_buy"
    SWEEP_PRINCIPAL_SELL = "sweep_principal_sell"
    TRANSFER_OF_TREASURY_CREDIT = "transfer_of_treasury_credit"
    TRANSFER_OF_TREASURY_DEBIT = "transfer_of_treasury_debit"
    TREASURY_TAX_AND_LOAN_CREDIT = "treasury_tax_and_loan_credit"
    TREASURY_TAX_AND_LOAN_DEBIT = "treasury_tax_and_loan_debit"
    TRUST_CREDIT = "trust_credit"
    TRUST_DEBIT = "trust_debit"
    UNIVERSAL_CREDIT = "universal_credit"
    UNIVERSAL_DEBIT = "universal_debit"
    YTD_ADJUSTMENT_CREDIT = "ytd_adjustment_credit"
    YTD_ADJUSTMENT_DEBIT = "ytd_adjustment_debit"
    ZBA_CREDIT = "zba_credit"
    ZBA_CREDIT_ADJUSTMENT = "zba_credit_adjustment"
    ZBA_CREDIT_TRANSFER = "zba_credit_transfer"
    ZBA_DEBIT = "zba_debit"
    ZBA_DEBIT_ADJUSTMENT = "zba_debit_adjustment"
    ZBA_DEBIT_TRANSFER = "zba_debit_transfer"
    ZBA_FLOAT_ADJUSTMENT = "zba_float_adjustment"
    # Non-monetary information record (890)
    INFO = "info"
    # Bank-defined codes in the 920-999 ranges
    CUSTOM = "custom"
    UNCLASSIFIED = "unclassified"


@dataclass(frozen=True)
class TransactionType:
    """Resolved transaction type; ``code`` is the code as written."""

    code: str
    direction: TransactionDirection
    category: TransactionCategory

    @property
    def is_custom(self) -> bool:
        return self.category == TransactionCategory.CUSTOM

    @property
    def is_unclassified(self) -> bool:
        return self.category == TransactionCategory.UNCLASSIFIED


_CR = TransactionDirection.CREDIT
_DR = TransactionDirection.DEBIT
_NA = TransactionDirection.UNCLASSIFIED
_C = TransactionCategory

_TRANSACTION_CODES: dict[str, tuple[TransactionDirection, TransactionCategory]] = {
    "108": (_CR, _C.CREDIT),
    "115": (_CR, _C.LOCKBOX_DEPOSIT),
    "116": (_CR, _C.ITEM_IN_LOCKBOX_DEPOSIT),
    "118": (_CR, _C.LOCKBOX_ADJUSTMENT_CREDIT),
    "121": (_CR, _C.EDI_TRANSACTION_CREDIT),
    "122": (_CR, _C.EDIBANX_CREDIT_RECEIVED),
    "123": (_CR, _C.EDIBANX_CREDIT_RETURN),
    "135": (_CR, _C.DTC_CONCENTRATION_CREDIT),
    "136": (_CR, _C.ITEM_IN_DTC_DEPOSIT),
    "142": (_CR, _C.ACH_CREDIT_RECEIVED),
    "143": (_CR, _C.ITEM_IN_ACH_DEPOSIT),
    "145": (_CR, _C.ACH_CONCENTRATION_CREDIT),
    "147": (_CR, _C.INDIVIDUAL_BANK_CARD_DEPOSIT),
    "155": (_CR, _C.PREAUTHORIZED_DRAFT_CREDIT),
    "156": (_CR, _C.ITEM_IN_PAC_DEPOSIT),
    "164": (_CR, _C.CORPORATE_TRADE_PAYMENT_CREDIT),
    "165": (_CR, _C.PREAUTHORIZED_ACH_CREDIT),
    "166": (_CR, _C.ACH_SETTLEMENT),
    "168": (_CR, _C.ACH_RETURN_ITEM_OR_ADJUSTMENT_SETTLEMENT),
    "169": (_CR, _C.MISCELLANEOUS_ACH_CREDIT),
    "171": (_CR, _C.INDIVIDUAL_LOAN_DEPOSIT),
    "172": (_CR, _C.DEPOSIT_CORRECTION),
    "173": (_CR, _C.BANK_PREPARED_DEPOSIT),
    "174": (_CR, _C.OTHER_DEPOSIT),
    "175": (_CR, _C.CHECK_DEPOSIT_PACKAGE),
    "176": (_CR, _C.RE_PRESENTED_CHECK_DEPOSIT),
    "184": (_CR, _C.DRAFT_DEPOSIT),
    "187": (_CR, _C.CASH_LETTER_CREDIT),
    "189": (_CR, _C.CASH_LETTER_ADJUSTMENT),
    "191": (_CR, _C.INDIVIDUAL_INCOMING_INTERNAL_MONEY_TRANSFER),
    "195": (_CR, _C.INCOMING_MONEY_TRANSFER),
    "196": (_CR, _C.MONEY_TRANSFER_ADJUSTMENT),
    "198": (_CR, _C.COMPENSATION),
    "201": (_CR, _C.INDIVIDUAL_AUTOMATIC_TRANSFER_CREDIT),
    "202": (_CR, _C.BOND_OPERATIONS_CREDIT),
    "206": (_CR, _C.BOOK_TRANSFER_CREDIT),
    "208": (_CR, _C.INDIVIDUAL_INTERNATIONAL_MONEY_TRANSFER_CREDIT),
    "212": (_CR, _C.FOREIGN_LETTER_OF_CREDIT),
    "213": (_CR, _C.LETTER_OF_CREDIT),
    "214": (_CR, _C.FOREIGN_EXCHANGE_OF_CREDIT),
    "216": (_CR, _C.FOREIGN_REMITTANCE_CREDIT),
    "218": (_CR, _C.FOREIGN_COLLECTION_CREDIT),
    "221": (_CR, _C.FOREIGN_CHECK_PURCHASE),
    "222": (_CR, _C.FOREIGN_CHECKS_DEPOSITED),
    "224": (_CR, _C.COMMISSION),
    "226": (_CR, _C.INTERNATIONAL_MONEY_MARKET_TRADING),
    "227": (_CR, _C.STANDING_ORDER),
    "229": (_CR, _C.MISCELLANEOUS_INTERNATIONAL_CREDIT),
    "232": (_CR, _C.SALE_OF_DEBT_SECURITY),
    "233": (_CR, _C.SECURITIES_SOLD),
    "234": (_CR, _C.SALE_OF_EQUITY_SECURITY),
    "235": (_CR, _C.MATURED_REVERSE_REPURCHASE_ORDER),
    "236": (_CR, _C.MATURITY_OF_DEBT_SECURITY),
    "237": (_CR, _C.INDIVIDUAL_COLLECTION_CREDIT),
    "238": (_CR, _C.COLLECTION_OF_DIVIDENDS),
    "240": (_CR, _C.COUPON_COLLECTIONS_BANKS),
    "241": (_CR, _C.BANKERS_ACCEPTANCES),
    "242": (_CR, _C.COLLECTION_OF_INTEREST_INCOME),
    "243": (_CR, _C.MATURED_FED_FUNDS_PURCHASED),
    "244": (_CR, _C.INTEREST_MATURED_PRINCIPAL_PAYMENT),
    "246": (_CR, _C.COMMERCIAL_PAPER),
    "247": (_CR, _C.CAPITAL_CHANGE),
    "248": (_CR, _C.SAVINGS_BONDS_SALES_ADJUSTMENT),
    "249": (_CR, _C.MISCELLANEOUS_SECURITY_CREDIT),
    "252": (_CR, _C.DEBIT_REVERSAL),
    "254": (_CR, _C.POSTING_ERROR_CORRECTION_CREDIT),
    "255": (_CR, _C.CHECK_POSTED_AND_RETURNED),
    "257": (_CR, _C.INDIVIDUAL_ACH_RETURN_ITEM),
    "258": (_CR, _C.ACH_REVERSAL_CREDIT),
    "261": (_CR, _C.INDIVIDUAL_REJECTED_CREDIT),
    "263": (_CR, _C.OVERDRAFT),
    "266": (_CR, _C.RETURN_ITEM),
    "268": (_CR, _C.RETURN_ITEM_ADJUSTMENT),
    "274": (_CR, _C.CUMULATIVE_ZBA_OR_DISBURSEMENT_CREDITS),
    "275": (_CR, _C.ZBA_CREDIT),
    "276": (_CR, _C.ZBA_FLOAT_ADJUSTMENT),
    "277": (_CR, _C.ZBA_CREDIT_TRANSFER),
    "278": (_CR, _C.ZBA_CREDIT_ADJUSTMENT),
    "281": (_CR, _C.INDIVIDUAL_CONTROLLED_DISBURSING_CREDIT),
    "286": (_CR, _C.INDIVIDUAL_DTC_DISBURSING_CREDIT),
    "295": (_CR, _C.ATM_CREDIT),
    "301": (_CR, _C.COMMERCIAL_DEPOSIT),
    "306": (_CR, _C.FED_FUNDS_SOLD),
    "308": (_CR, _C.TRUST_CREDIT),
    "331": (_CR, _C.INDIVIDUAL_ESCROW_CREDIT),
    "342": (_CR, _C.BROKER_DEPOSIT),
    "344": (_CR, _C.INDIVIDUAL_BACK_VALUE_CREDIT),
    "345": (_CR, _C.ITEM_IN_BROKERS_DEPOSIT),
    "346": (_CR, _C.SWEEP_INTEREST_INCOME),
    "347": (_CR, _C.SWEEP_PRINCIPAL_SELL),
    "348": (_CR, _C.FUTURES_CREDIT),
    "349": (_CR, _C.PRINCIPAL_PAYMENTS_CREDIT),
    "351": (_CR, _C.INDIVIDUAL_INVESTMENT_SOLD),
    "353": (_CR, _C.CASH_CENTER_CREDIT),
    "354": (_CR, _C.INTEREST_CREDIT),
    "357": (_CR, _C.CREDIT_ADJUSTMENT),
    "358": (_CR, _C.YTD_ADJUSTMENT_CREDIT),
    "359": (_CR, _C.INTEREST_ADJUSTMENT_CREDIT),
    "362": (_CR, _C.CORRESPONDENT_COLLECTION),
    "363": (_CR, _C.CORRESPONDENT_COLLECTION_ADJUSTMENT),
    "364": (_CR, _C.LOAN_PARTICIPATION),
    "366": (_CR, _C.CURRENCY_AND_COIN_DEPOSITED),
    "367": (_CR, _C.FOOD_STAMP_LETTER),
    "368": (_CR, _C.FOOD_STAMP_ADJUSTMENT),
    "369": (_CR, _C.CLEARING_SETTLEMENT_CREDIT),
    "372": (_CR, _C.BACK_VALUE_ADJUSTMENT),
    "373": (_CR, _C.CUSTOMER_PAYROLL),
    "374": (_CR, _C.FRB_STATEMENT_RECAP),
    "376": (_CR, _C.SAVINGS_BOND_LETTER_OR_ADJUSTMENT),
    "377": (_CR, _C.TREASURY_TAX_AND_LOAN_CREDIT),
    "378": (_CR, _C.TRANSFER_OF_TREASURY_CREDIT),
    "379": (_CR, _C.FRB_GOVERNMENT_CHECKS_CASH_LETTER_CREDIT),
    "381": (_CR, _C.FRB_GOVERNMENT_CHECK_ADJUSTMENT),
    "382": (_CR, _C.FRB_POSTAL_MONEY_ORDER_CREDIT),
    "383": (_CR, _C.FRB_POSTAL_MONEY_ORDER_ADJUSTMENT),
    "384": (_CR, _C.FRB_CASH_LETTER_AUTO_CHARGE_CREDIT),
    "386": (_CR, _C.FRB_CASH_LETTER_AUTO_CHARGE_ADJUSTMENT),
    "387": (_CR, _C.FRB_FINE_SORT_CASH_LETTER_CREDIT),
    "388": (_CR, _C.FRB_FINE_SORT_ADJUSTMENT),
    "391": (_CR, _C.UNIVERSAL_CREDIT),
    "392": (_CR, _C.FREIGHT_PAYMENT_CREDIT),
    "393": (_CR, _C.ITEMIZED_CREDIT_OVER_10000),
    "394": (_CR, _C.CUMULATIVE_CREDITS),
    "395": (_CR, _C.CHECK_REVERSAL),
    "397": (_CR, _C.FLOAT_ADJUSTMENT),
    "398": (_CR, _C.MISCELLANEOUS_FEE_REFUND),
    "399": (_CR, _C.MISCELLANEOUS_CREDIT),
    "408": (_DR, _C.FLOAT_ADJUSTMENT),
    "409": (_DR, _C.DEBIT_ANY_TYPE),
    "415": (_DR, _C.LOCKBOX_DEBIT),
    "421": (_DR, _C.EDI_TRANSACTION_DEBIT),
    "422": (_DR, _C.EDIBANX_SETTLEMENT_DEBIT),
    "423": (_DR, _C.EDIBANX_RETURN_ITEM_DEBIT),
    "435": (_DR, _C.PAYABLE_THROUGH_DRAFT),
    "445": (_DR, _C.ACH_CONCENTRATION_DEBIT),
    "447": (_DR, _C.ACH_DISBURSEMENT_FUNDING_DEBIT),
    "451": (_DR, _C.ACH_DEBIT_RECEIVED),
    "452": (_DR, _C.ITEM_IN_ACH_DISBURSEMENT_OR_DEBIT),
    "455": (_DR, _C.PREAUTHORIZED_ACH_DEBIT),
    "462": (_DR, _C.ACCOUNT_HOLDER_INITIATED_ACH_DEBIT),
    "464": (_DR, _C.CORPORATE_TRADE_PAYMENT_DEBIT),
    "466": (_DR, _C.ACH_SETTLEMENT),
    "468": (_DR, _C.ACH_RETURN_ITEM_OR_ADJUSTMENT_SETTLEMENT),
    "469": (_DR, _C.MISCELLANEOUS_ACH_DEBIT),
    "472": (_DR, _C.CUMULATIVE_CHECKS_PAID),
    "474": (_DR, _C.CERTIFIED_CHECK_DEBIT),
    "475": (_DR, _C.CHECK_PAID),
    "476": (_DR, _C.FEDERAL_RESERVE_BANK_LETTER_DEBIT),
    "477": (_DR, _C.BANK_ORIGINATED_DEBIT),
    "479": (_DR, _C.LIST_POST_DEBIT),
    "481": (_DR, _C.INDIVIDUAL_LOAN_PAYMENT),
    "484": (_DR, _C.DRAFT),
    "485": (_DR, _C.DTC_DEBIT),
    "487": (_DR, _C.CASH_LETTER_DEBIT),
    "489": (_DR, _C.CASH_LETTER_ADJUSTMENT),
    "491": (_DR, _C.INDIVIDUAL_OUTGOING_INTERNAL_MONEY_TRANSFER),
    "493": (_DR, _C.CUSTOMER_TERMINAL_INITIATED_MONEY_TRANSFER),
    "495": (_DR, _C.OUTGOING_MONEY_TRANSFER),
    "496": (_DR, _C.MONEY_TRANSFER_ADJUSTMENT),
    "498": (_DR, _C.COMPENSATION),
    "501": (_DR, _C.INDIVIDUAL_AUTOMATIC_TRANSFER_DEBIT),
    "502": (_DR, _C.BOND_OPERATIONS_DEBIT),
    "506": (_DR, _C.BOOK_TRANSFER_DEBIT),
    "508": (_DR, _C.INDIVIDUAL_INTERNATIONAL_MONEY_TRANSFER_DEBITS),
    "512": (_DR, _C.LETTER_OF_CREDIT_DEBIT),
    "513": (_DR, _C.LETTER_OF_CREDIT),
    "514": (_DR, _C.FOREIGN_EXCHANGE_DEBIT),
    "516": (_DR, _C.FOREIGN_REMITTANCE_DEBIT),
    "518": (_DR, _C.FOREIGN_COLLECTION_DEBIT),
    "522": (_DR, _C.FOREIGN_CHECKS_PAID),
    "524": (_DR, _C.COMMISSION),
    "526": (_DR, _C.INTERNATIONAL_MONEY_MARKET_TRADING),
    "527": (_DR, _C.STANDING_ORDER),
    "529": (_DR, _C.MISCELLANEOUS_INTERNATIONAL_DEBIT),
    "531": (_DR, _C.SECURITIES_PURCHASED),
    "533": (_DR, _C.SECURITY_COLLECTION_DEBIT),
    "535": (_DR, _C.PURCHASE_OF_EQUITY_SECURITIES),
    "538": (_DR, _C.MATURED_REPURCHASE_ORDER),
    "540": (_DR, _C.COUPON_COLLECTION_DEBIT),
    "541": (_DR, _C.BANKERS_ACCEPTANCES),
    "542": (_DR, _C.PURCHASE_OF_DEBT_SECURITIES),
    "543": (_DR, _C.DOMESTIC_COLLECTION),
    "544": (_DR, _C.INTEREST_MATURED_PRINCIPAL_PAYMENT),
    "546": (_DR, _C.COMMERCIAL_PAPER),
    "547": (_DR, _C.CAPITAL_CHANGE),
    "548": (_DR, _C.SAVINGS_BONDS_SALES_ADJUSTMENT),
    "549": (_DR, _C.MISCELLANEOUS_SECURITY_DEBIT),
    "552": (_DR, _C.CREDIT_REVERSAL),
    "554": (_DR, _C.POSTING_ERROR_CORRECTION_DEBIT),
    "555": (_DR, _C.DEPOSITED_ITEM_RETURNED),
    "557": (_DR, _C.INDIVIDUAL_ACH_RETURN_ITEM),
    "558": (_DR, _C.ACH_REVERSAL_DEBIT),
    "561": (_DR, _C.INDIVIDUAL_REJECTED_DEBIT),
    "563": (_DR, _C.OVERDRAFT),
    "564": (_DR, _C.OVERDRAFT_FEE),
    "566": (_DR, _C.RETURN_ITEM),
    "567": (_DR, _C.RETURN_ITEM_FEE),
    "568": (_DR, _C.RETURN_ITEM_ADJUSTMENT),
    "574": (_DR, _C.CUMULATIVE_ZBA_DEBITS),
    "575": (_DR, _C.ZBA_DEBIT),
    "577": (_DR, _C.ZBA_DEBIT_TRANSFER),
    "578": (_DR, _C.ZBA_DEBIT_ADJUSTMENT),
    "581": (_DR, _C.INDIVIDUAL_CONTROLLED_DISBURSING_DEBIT),
    "595": (_DR, _C.ATM_DEBIT),
    "597": (_DR, _C.ARP_DEBIT),
    "616": (_DR, _C.FEDERAL_RESERVE_BANK_COMMERCIAL_BANK_DEBIT),
    "622": (_DR, _C.BROKER_DEBIT),
    "627": (_DR, _C.FED_FUNDS_PURCHASED),
    "629": (_DR, _C.CASH_CENTER_DEBIT),
    "631": (_DR, _C.DEBIT_ADJUSTMENT),
    "633": (_DR, _C.TRUST_DEBIT),
    "634": (_DR, _C.YTD_ADJUSTMENT_DEBIT),
    "641": (_DR, _C.INDIVIDUAL_ESCROW_DEBIT),
    "644": (_DR, _C.INDIVIDUAL_BACK_VALUE_DEBIT),
    "651": (_DR, _C.INDIVIDUAL_INVESTMENT_PURCHASED),
    "654": (_DR, _C.INTEREST_DEBIT),
    "656": (_DR, _C.SWEEP_PRINCIPAL_BUY),
    "657": (_DR, _C.FUTURES_DEBIT),
    "658": (_DR, _C.PRINCIPAL_PAYMENTS_DEBIT),
    "659": (_DR, _C.INTEREST_ADJUSTMENT_DEBIT),
    "661": (_DR, _C.ACCOUNT_ANALYSIS_FEE),
    "662": (_DR, _C.CORRESPONDENT_COLLECTION_DEBIT),
    "663": (_DR, _C.CORRESPONDENT_COLLECTION_ADJUSTMENT),
    "664": (_DR, _C.LOAN_PARTICIPATION),
    "666": (_DR, _C.CURRENCY_AND_COIN_SHIPPED),
    "667": (_DR, _C.FOOD_STAMP_LETTER),
    "668": (_DR, _C.FOOD_STAMP_ADJUSTMENT),
    "669": (_DR, _C.CLEARING_SETTLEMENT_DEBIT),
    "672": (_DR, _C.BACK_VALUE_ADJUSTMENT),
    "673": (_DR, _C.CUSTOMER_PAYROLL),
    "674": (_DR, _C.FRB_STATEMENT_RECAP),
    "676": (_DR, _C.SAVINGS_BOND_LETTER_OR_ADJUSTMENT),
    "677": (_DR, _C.TREASURY_TAX_AND_LOAN_DEBIT),
    "678": (_DR, _C.TRANSFER_OF_TREASURY_DEBIT),
    "679": (_DR, _C.FRB_GOVERNMENT_CHECKS_CASH_LETTER_DEBIT),
    "681": (_DR, _C.FRB_GOVERNMENT_CHECK_ADJUSTMENT),
    "682": (_DR, _C.FRB_POSTAL_MONEY_ORDER_DEBIT),
    "683": (_DR, _C.FRB_POSTAL_MONEY_ORDER_ADJUSTMENT),
    "684": (_DR, _C.FRB_CASH_LETTER_AUTO_CHARGE_DEBIT),
    "686": (_DR, _C.FRB_CASH_LETTER_AUTO_CHARGE_ADJUSTMENT),
    "687": (_DR, _C.FRB_FINE_SORT_CASH_LETTER_DEBIT),
    "688": (_DR, _C.FRB_FINE_SORT_ADJUSTMENT),
    "691": (_DR, _C.UNIVERSAL_DEBIT),
    "692": (_DR, _C.FREIGHT_PAYMENT_DEBIT),
    "693": (_DR, _C.ITEMIZED_DEBIT_OVER_10000),
    "694": (_DR, _C.DEPOSIT_REVERSAL),
    "695": (_DR, _C.DEPOSIT_CORRECTION_DEBIT),
    "696": (_DR, _C.REGULAR_COLLECTION_DEBIT),
    "697": (_DR, _C.CUMULATIVE_DEBITS),
    "698": (_DR, _C.MISCELLANEOUS_FEES),
    "699": (_DR, _C.MISCELLANEOUS_DEBIT),
    "721": (_CR, _C.AMOUNT_APPLIED_TO_INTEREST),
    "722": (_CR, _C.AMOUNT_APPLIED_TO_PRINCIPAL),
    "723": (_CR, _C.AMOUNT_APPLIED_TO_ESCROW),
    "724": (_CR, _C.AMOUNT_APPLIED_TO_LATE_CHARGES),
    "725": (_CR, _C.AMOUNT_APPLIED_TO_BUYDOWN),
    "726": (_CR, _C.AMOUNT_APPLIED_TO_MISC_FEES),
    "727": (_CR, _C.AMOUNT_APPLIED_TO_DEFERRED_INTEREST_DETAIL),
    "728": (_CR, _C.AMOUNT_APPLIED_TO_SERVICE_CHARGE),
    "890": (_NA, _C.INFO),
}

_CUSTOM_CREDIT_RANGE = range(920, 960)
_CUSTOM_DEBIT_RANGE = range(960, 1000)


def resolve_transaction_type(code: str) -> TransactionType:
    """Resolve a detail type code. Never raises; unknown codes are unclassified."""
    known = _TRANSACTION_CODES.get(code)
    if known is not None:
        direction, category = known
        return TransactionType(code=code, direction=direction, category=category)

    if code.isascii() and code.isdigit():
        n = int(code)
        if n in _CUSTOM_CREDIT_RANGE:
            return TransactionType(code=code, direction=_CR, category=_C.CUSTOM)
        if n in _CUSTOM_DEBIT_RANGE:
            return TransactionType(code=code, direction=_DR, category=_C.CUSTOM)

    return TransactionType(code=code, direction=_NA, category=_C.UNCLASSIFIED)


def known_transaction_codes() -> frozenset[str]:
    """Codes present in the standard table (custom ranges excluded)."""
    return frozenset(_TRANSACTION_CODES)
