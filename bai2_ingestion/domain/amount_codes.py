"""
bai2_ingestion.domain.amount_codes -- BAI2 status / summary amount type codes.

Account identifier (03) records carry repeating summaries, each opened by a
3-digit type code. The code resolves to a category (status, credit summary,
debit summary) and a subtype. Custom ranges:

    900-919  custom status
    920-959  custom credit summary
    960-999  custom debit summary

Any other code resolves to UNCLASSIFIED; the raw code is always kept.

Architecture: bai2_ingestion/domain. ZERO I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AmountCategory(str, Enum):
    """Top-level class of an account summary amount."""

    STATUS = "status"
    CREDIT_SUMMARY = "credit_summary"
    DEBIT_SUMMARY = "debit_summary"
    UNCLASSIFIED = "unclassified"


class AmountSubtype(str, Enum):
    """Standard BAI2 summary subtypes plus the fallback variants."""

    ACH_NET_POSITION = "ach_net_position"
    ACH_SETTLEMENT_CREDITS = "ach_settlement_credits"
    ACH_SETTLEMENT_DEBITS = "ach_settlement_debits"
    ADJUSTED_BALANCE = "adjusted_balance"
    ADJUSTED_BALANCE_MTD = "adjusted_balance_mtd"
    ADJUSTED_BALANCE_YTD = "adjusted_balance_ytd"
    ADJUSTED_TOTAL_DISBURSEMENT = "adjusted_total_disbursement"
    ADJUSTMENT_TO_BALANCES = "adjustment_to_balances"
    AGGREGATE_BALANCE_ADJUSTMENTS = "aggregate_balance_adjustments"
    AVAILABLE_COMMITMENT_AMOUNT = "available_commitment_amount"
    AVERAGE_1_DAY_FLOAT_MTD = "average_1_day_float_mtd"
    AVERAGE_1_DAY_FLOAT_YTD = "average_1_day_float_ytd"
    AVERAGE_2_DAY_FLOAT_MTD = "average_2_day_float_mtd"
    AVERAGE_2_DAY_FLOAT_YTD = "average_2_day_float_ytd"
    AVERAGE_ADJUSTMENT_TO_BALANCES_MTD = "average_adjustment_to_balances_mtd"
    AVERAGE_ADJUSTMENT_TO_BALANCES_YTD = "average_adjustment_to_balances_ytd"
    AVERAGE_AVAILABLE_PREVIOUS_MONTH = "average_available_previous_month"
    AVERAGE_CLOSING_AVAILABLE_LAST_MONTH = "average_closing_available_last_month"
    AVERAGE_CLOSING_AVAILABLE_MTD = "average_closing_available_mtd"
    AVERAGE_CLOSING_AVAILABLE_YTD = "average_closing_available_ytd"
    AVERAGE_CLOSING_AVAILABLE_YTD_LAST_MONTH = "average_closing_available_ytd_last_month"
    AVERAGE_CLOSING_LEDGER_MTD = "average_closing_ledger_mtd"
    AVERAGE_CLOSING_LEDGER_PREVIOUS_MONTH = "average_closing_ledger_previous_month"
    AVERAGE_CLOSING_LEDGER_YTD = "average_closing_ledger_ytd"
    AVERAGE_CLOSING_LEDGER_YTD_PREVIOUS_MONTH = "average_closing_ledger_ytd_previous_month"
    AVERAGE_CURRENT_AVAILABLE_MTD = "average_current_available_mtd"
    AVERAGE_CURRENT_AVAILABLE_YTD = "average_current_available_ytd"
    AVERAGE_OPENING_AVAILABLE_MTD = "average_opening_available_mtd"
    AVERAGE_OPENING_AVAILABLE_YTD = "average_opening_available_ytd"
    AVERAGE_OPENING_LEDGER_MTD = "average_opening_ledger_mtd"
    AVERAGE_OPENING_LEDGER_YTD = "average_opening_ledger_ytd"
    CLOSING_AVAILABLE = "closing_available"
    CLOSING_LEDGER = "closing_ledger"
    CORPORATE_TRADE_PAYMENT_CREDITS = "corporate_trade_payment_credits"
    CORPORATE_TRADE_PAYMENT_DEBITS = "corporate_trade_payment_debits"
    CORPORATE_TRADE_PAYMENT_SETTLEMENT = "corporate_trade_payment_settlement"
    CORRESPONDENT_BANK_DEPOSIT = "correspondent_bank_deposit"
    CREDITS_NOT_DETAILED = "credits_not_detailed"
    CURRENT_AVAILABLE = "current_available"
    CURRENT_AVAILABLE_CRS_SUPRESSED = "current_available_crs_supressed"
    CURRENT_DAY_TOTAL_LOCKBOX_DEPOSITS = "current_day_total_lockbox_deposits"
    CURRENT_LEDGER = "current_ledger"
    DEBITS_NOT_DETAILED = "debits_not_detailed"
    DEPOSITS_SUBJECT_TO_FLOAT = "deposits_subject_to_float"
    DISBURSING_FUNDING_REQUIREMENT = "disbursing_funding_requirement"
    DISBURSING_OPENING_AVAILABLE_BALANCE = "disbursing_opening_available_balance"
    EDI_TRANSACTION_CREDIT = "edi_transaction_credit"
    EDI_TRANSACTION_DEBITS = "edi_transaction_debits"
    ESTIMATED_TOTAL_DISBURSEMENT = "estimated_total_disbursement"
    FIVE_DAY_FLOAT = "five_day_float"
    FLOAT_ADJUSTMENT = "float_adjustment"
    FOUR_DAY_FLOAT = "four_day_float"
    FRB_FREIGHT_PAYMENT_DEBITS = "frb_freight_payment_debits"
    FRB_PRESENTMENT_ESTIMATE = "frb_presentment_estimate"
    GRAND_TOTAL_CREDITS_LESS_GRAND_TOTAL_DEBITS = "grand_total_credits_less_grand_total_debits"
    INTERCEPT_DEBITS = "intercept_debits"
    INTEREST_AMOUNT_PAST_DUE = "interest_amount_past_due"
    INVESTMENTS_PURCHASED = "investments_purchased"
    INVESTMENT_INTEREST = "investment_interest"
    INVESTMENT_SOLD = "investment_sold"
    LATE_DEBITS_AFTER_NOTIFICATION = "late_debits_after_notification"
    LATE_DEPOSIT = "late_deposit"
    LIST_POST_CREDITS = "list_post_credits"
    LIST_POST_DEBITS = "list_post_debits"
    LOAN_BALANCE = "loan_balance"
    LOAN_DISBURSEMENT = "loan_disbursement"
    MONTHLY_DIVIDENDS = "monthly_dividends"
    NET_ZERO_BALANCE_AMOUNT = "net_zero_balance_amount"
    ONE_DAY_FLOAT = "one_day_float"
    OPENING_AVAILABLE = "opening_available"
    OPENING_AVAILABLE_AND_TOTAL_SAME_DAY_ACH_DTC_DEPOSIT = "opening_available_and_total_same_day_ach_dtc_deposit"
    OPENING_LEDGER = "opening_ledger"
    PAYMENT_AMOUNT_DUE = "payment_amount_due"
    PRINCIPAL_AMOUNT_PAST_DUE = "principal_amount_past_due"
    PRINCIPAL_LOAN_BALANCE = "principal_loan_balance"
    SIX_DAY_FLOAT = "six_day_float"
    TARGET_BALANCE = "target_balance"
    THREE_OR_MORE_DAYS_FLOAT = "three_or_more_days_float"
    TODAYS_TOTAL_DEBITS = "todays_total_debits"
    TOTAL_ACH_CREDITS = "total_ach_credits"
    TOTAL_ACH_DEBITS = "total_ach_debits"
    TOTAL_ACH_DISBURSEMENT_FUNDING_DEBITS = "total_ach_disbursement_funding_debits"
    TOTAL_ACH_DISBURSING_FUNDING_CREDITS = "total_ach_disbursing_funding_credits"
    TOTAL_ACH_RETURN_ITEMS = "total_ach_return_items"
    TOTAL_ADJUSTMENT_CREDITS_YTD = "total_adjustment_credits_ytd"
    TOTAL_AMOUNT_OF_SECURITIES_PURCHASED = "total_amount_of_securities_purchased"
    TOTAL_APR_DEBITS = "total_apr_debits"
    TOTAL_ATM_CREDITS = "total_atm_credits"
    TOTAL_ATM_DEBITS = "total_atm_debits"
    TOTAL_AUTOMATIC_TRANSFER_CREDITS = "total_automatic_transfer_credits"
    TOTAL_AUTOMATIC_TRANSFER_DEBITS = "total_automatic_transfer_debits"
    TOTAL_BACK_VALUE_CREDITS = "total_back_value_credits"
    TOTAL_BACK_VALUE_DEBITS = "total_back_value_debits"
    TOTAL_BANKERS_ACCEPTANCES_DEBIT = "total_bankers_acceptances_debit"
    TOTAL_BANKERS_ACCEPTANCE_CREDITS = "total_bankers_acceptance_credits"
    TOTAL_BANK_CARD_DEPOSITS = "total_bank_card_deposits"
    TOTAL_BANK_ORIGINATED_DEBITS = "total_bank_originated_debits"
    TOTAL_BANK_PREPARED_DEPOSITS = "total_bank_prepared_deposits"
    TOTAL_BOOK_TRANSFER_CREDITS = "total_book_transfer_credits"
    TOTAL_BOOK_TRANSFER_DEBITS = "total_book_transfer_debits"
    TOTAL_BROKER_DEBITS = "total_broker_debits"
    TOTAL_BROKER_DEBITS_CHF = "total_broker_debits_chf"
    TOTAL_BROKER_DEBITS_FF = "total_broker_debits_ff"
    TOTAL_BROKER_DEPOSITS = "total_broker_deposits"
    TOTAL_BROKER_DEPOSITS_CHF = "total_broker_deposits_chf"
    TOTAL_BROKER_DEPOSITS_FF = "total_broker_deposits_ff"
    TOTAL_CASH_CENTER_CREDITS = "total_cash_center_credits"
    TOTAL_CASH_CENTER_DEBITS = "total_cash_center_debits"
    TOTAL_CASH_LETTER_ADJUSTMENTS = "total_cash_letter_adjustments"
    TOTAL_CASH_LETTER_CREDITS = "total_cash_letter_credits"
    TOTAL_CASH_LETTER_DEBITS = "total_cash_letter_debits"
    TOTAL_CHECKS_POSTED_AND_RETURNED = "total_checks_posted_and_returned"
    TOTAL_CHECK_PAID = "total_check_paid"
    TOTAL_CHECK_PAID_CUMULATIVE_MTD = "total_check_paid_cumulative_mtd"
    TOTAL_COLLECTION_CREDITS = "total_collection_credits"
    TOTAL_COLLECTION_DEBIT = "total_collection_debit"
    TOTAL_COMMERCIAL_DEPOSITS = "total_commercial_deposits"
    TOTAL_CONCENTRATION_CREDITS = "total_concentration_credits"
    TOTAL_CONTROLLED_DISBURSING_CREDITS = "total_controlled_disbursing_credits"
    TOTAL_CONTROLLED_DISBURSING_DEBITS = "total_controlled_disbursing_debits"
    TOTAL_CREDITS = "total_credits"
    TOTAL_CREDITS_LESS_WIRE_TRANSFER_AND_RETURNED_CHECKS = "total_credits_less_wire_transfer_and_returned_checks"
    TOTAL_CREDIT_ADJUSTMENT = "total_credit_adjustment"
    TOTAL_CREDIT_AMOUNT_MTD = "total_credit_amount_mtd"
    TOTAL_CREDIT_REVERSALS = "total_credit_reversals"
    TOTAL_DEBITS = "total_debits"
    TOTAL_DEBITS_EXCLUDING_RETURNED_ITEMS = "total_debits_excluding_returned_items"
    TOTAL_DEBIT_ADJUSTMENTS = "total_debit_adjustments"
    TOTAL_DEBIT_AMOUNT_MTD = "total_debit_amount_mtd"
    TOTAL_DEBIT_LESS_WIRE_TRANSFERS_AND_CHARGE_BACKS = "total_debit_less_wire_transfers_and_charge_backs"
    TOTAL_DEBIT_REVERSALS = "total_debit_reversals"
    TOTAL_DEPOSITED_ITEMS_RETURNED = "total_deposited_items_returned"
    TOTAL_DISBURSING_CHECKS_PAID_EARLY_AMOUNT = "total_disbursing_checks_paid_early_amount"
    TOTAL_DISBURSING_CHECKS_PAID_LAST_AMOUNT = "total_disbursing_checks_paid_last_amount"
    TOTAL_DISBURSING_CHECKS_PAID_LATER_AMOUNT = "total_disbursing_checks_paid_later_amount"
    TOTAL_DTC_CREDITS = "total_dtc_credits"
    TOTAL_DTC_DEBITS = "total_dtc_debits"
    TOTAL_DTC_DISBURSING_CREDITS = "total_dtc_disbursing_credits"
    TOTAL_ESCROW_CREDITS = "total_escrow_credits"
    TOTAL_ESCROW_DEBITS = "total_escrow_debits"
    TOTAL_FEDERAL_RESERVE_BANK_COMMERCIAL_BANK_DEBIT = "total_federal_reserve_bank_commercial_bank_debit"
    TOTAL_FED_FUNDS_PURCHASED = "total_fed_funds_purchased"
    TOTAL_FED_FUNDS_SOLD = "total_fed_funds_sold"
    TOTAL_FLOAT = "total_float"
    TOTAL_FOREIGN_CHECK_PURCHASED = "total_foreign_check_purchased"
    TOTAL_FREIGHT_PAYMENT_CREDITS = "total_freight_payment_credits"
    TOTAL_FUNDS_REQUIRED = "total_funds_required"
    TOTAL_INCOMING_MONEY_TRANSFERS = "total_incoming_money_transfers"
    TOTAL_INTERNATIONAL_CREDITS = "total_international_credits"
    TOTAL_INTERNATIONAL_CREDITS_CHF = "total_international_credits_chf"
    TOTAL_INTERNATIONAL_CREDITS_FF = "total_international_credits_ff"
    TOTAL_INTERNATIONAL_DEBITS = "total_international_debits"
    TOTAL_INTERNATIONAL_DEBIT_CHF = "total_international_debit_chf"
    TOTAL_INTERNATIONAL_DEBIT_FF = "total_international_debit_ff"
    TOTAL_INTERNATIONAL_MONEY_TRANSFER_CREDITS = "total_international_money_transfer_credits"
    TOTAL_INTERNATIONAL_MONEY_TRANSFER_DEBITS = "total_international_money_transfer_debits"
    TOTAL_INVESTMENT_INTEREST_DEBITS = "total_investment_interest_debits"
    TOTAL_INVESTMENT_POSITION = "total_investment_position"
    TOTAL_LETTERS_OF_CREDIT = "total_letters_of_credit"
    TOTAL_LOAN_PAYMENT = "total_loan_payment"
    TOTAL_LOAN_PAYMENTS = "total_loan_payments"
    TOTAL_LOAN_PROCEEDS = "total_loan_proceeds"
    TOTAL_LOCKBOX_DEBITS = "total_lockbox_debits"
    TOTAL_LOCKBOX_DEPOSITS = "total_lockbox_deposits"
    TOTAL_MISCELLANEOUS_CREDITS = "total_miscellaneous_credits"
    TOTAL_MISCELLANEOUS_DEBITS = "total_miscellaneous_debits"
    TOTAL_MISCELLANEOUS_DEPOSITS = "total_miscellaneous_deposits"
    TOTAL_MISCELLANEOUS_SECURITIES_CREDITS_CHF = "total_miscellaneous_securities_credits_chf"
    TOTAL_MISCELLANEOUS_SECURITIES_CREDITS_FF = "total_miscellaneous_securities_credits_ff"
    TOTAL_MISCELLANEOUS_SECURITIES_DB_FF = "total_miscellaneous_securities_db_ff"
    TOTAL_MISCELLANEOUS_SECURITIES_DEBIT_CHF = "total_miscellaneous_securities_debit_chf"
    TOTAL_OTHER_CHECK_DEPOSITS = "total_other_check_deposits"
    TOTAL_OUTGOING_MONEY_TRANSFERS = "total_outgoing_money_transfers"
    TOTAL_PAYABLE_THROUGH_DRAFTS = "total_payable_through_drafts"
    TOTAL_PREAUTHORIZED_PAYMENT_CREDITS = "total_preauthorized_payment_credits"
    TOTAL_REJECTED_CREDITS = "total_rejected_credits"
    TOTAL_REJECTED_DEBITS = "total_rejected_debits"
    TOTAL_SECURITIES_INTEREST = "total_securities_interest"
    TOTAL_SECURITIES_INTEREST_CHF = "total_securities_interest_chf"
    TOTAL_SECURITIES_INTEREST_FF = "total_securities_interest_ff"
    TOTAL_SECURITIES_MATURED = "total_securities_matured"
    TOTAL_SECURITIES_MATURED_CHF = "total_securities_matured_chf"
    TOTAL_SECURITIES_MATURED_FF = "total_securities_matured_ff"
    TOTAL_SECURITIES_PURCHASED_CHF = "total_securities_purchased_chf"
    TOTAL_SECURITIES_PURCHASED_FF = "total_securities_purchased_ff"
    TOTAL_SECURITIES_SOLD = "total_securities_sold"
    TOTAL_SECURITIES_SOLD_CHF = "total_securities_sold_chf"
    TOTAL_SECURITIES_SOLD_FF = "total_securities_sold_ff"
    TOTAL_SECURITY_CREDITS = "total_security_credits"
    TOTAL_SECURITY_DEBITS = "total_security_debits"
    TOTAL_TRUST_CREDITS = "total_trust_credits"
    TOTAL_TRUST_DEBITS = "total_trust_debits"
    TOTAL_UNIVERSAL_CREDITS = "total_universal_credits"
    TOTAL_UNIVERSAL_DEBITS = "total_universal_debits"
    TOTAL_VALUE_DATED_FUNDS = "total_value_dated_funds"
    TOTAL_WIRE_TRANSFERS_IN_CHF = "total_wire_transfers_in_chf"
    TOTAL_WIRE_TRANSFERS_IN_FF = "total_wire_transfers_in_ff"
    TOTAL_WIRE_TRANSFERS_OUT_CHF = "total_wire_transfers_out_chf"
    TOTAL_WIRE_TRANSFERS_OUT_FF = "total_wire_transfers_out_ff"
    TOTAL_YTD_ADJUSTMENT = "total_ytd_adjustment"
    TOTAL_ZBA_CREDITS = "total_zba_credits"
    TOTAL_ZBA_DEBITS = "total_zba_debits"
    TRANSFER_CALCULATION = "transfer_calculation"
    TRANSFER_CALCULATION_DEBIT = "transfer_calculation_debit"
    TWO_OR_MORE_DAYS_FLOAT = "two_or_more_days_float"
    ZERO_DAY_FLOAT = "zero_day_float"
    CUSTOM_STATUS = "custom_status"
    CUSTOM_CREDIT_SUMMARY = "custom_credit_summary"
    CUSTOM_DEBIT_SUMMARY = "custom_debit_summary"
    UNCLASSIFIED = "unclassified"


@dataclass(frozen=True)
class AmountType:
    """Resolved summary amount type; ``code`` is the code as written."""

    code: str
    category: AmountCategory
    subtype: AmountSubtype

    @property
    def is_unclassified(self) -> bool:
        return self.category == AmountCategory.UNCLASSIFIED


_ST = AmountCategory.STATUS
_CS = AmountCategory.CREDIT_SUMMARY
_DS = AmountCategory.DEBIT_SUMMARY
_S = AmountSubtype

_AMOUNT_CODES: dict[str, tuple[AmountCategory, AmountSubtype]] = {
    "010": (_ST, _S.OPENING_LEDGER),
    "011": (_ST, _S.AVERAGE_OPENING_LEDGER_MTD),
    "012": (_ST, _S.AVERAGE_OPENING_LEDGER_YTD),
    "015": (_ST, _S.CLOSING_LEDGER),
    "020": (_ST, _S.AVERAGE_CLOSING_LEDGER_MTD),
    "021": (_ST, _S.AVERAGE_CLOSING_LEDGER_PREVIOUS_MONTH),
    "022": (_ST, _S.AGGREGATE_BALANCE_ADJUSTMENTS),
    "024": (_ST, _S.AVERAGE_CLOSING_LEDGER_YTD_PREVIOUS_MONTH),
    "025": (_ST, _S.AVERAGE_CLOSING_LEDGER_YTD),
    "030": (_ST, _S.CURRENT_LEDGER),
    "037": (_ST, _S.ACH_NET_POSITION),
    "039": (_ST, _S.OPENING_AVAILABLE_AND_TOTAL_SAME_DAY_ACH_DTC_DEPOSIT),
    "040": (_ST, _S.OPENING_AVAILABLE),
    "041": (_ST, _S.AVERAGE_OPENING_AVAILABLE_MTD),
    "042": (_ST, _S.AVERAGE_OPENING_AVAILABLE_YTD),
    "043": (_ST, _S.AVERAGE_AVAILABLE_PREVIOUS_MONTH),
    "044": (_ST, _S.DISBURSING_OPENING_AVAILABLE_BALANCE),
    "045": (_ST, _S.CLOSING_AVAILABLE),
    "050": (_ST, _S.AVERAGE_CLOSING_AVAILABLE_MTD),
    "051": (_ST, _S.AVERAGE_CLOSING_AVAILABLE_LAST_MONTH),
    "054": (_ST, _S.AVERAGE_CLOSING_AVAILABLE_YTD_LAST_MONTH),
    "055": (_ST, _S.AVERAGE_CLOSING_AVAILABLE_YTD),
    "056": (_ST, _S.LOAN_BALANCE),
    "057": (_ST, _S.TOTAL_INVESTMENT_POSITION),
    "059": (_ST, _S.CURRENT_AVAILABLE_CRS_SUPRESSED),
    "060": (_ST, _S.CURRENT_AVAILABLE),
    "061": (_ST, _S.AVERAGE_CURRENT_AVAILABLE_MTD),
    "062": (_ST, _S.AVERAGE_CURRENT_AVAILABLE_YTD),
    "063": (_ST, _S.TOTAL_FLOAT),
    "065": (_ST, _S.TARGET_BALANCE),
    "066": (_ST, _S.ADJUSTED_BALANCE),
    "067": (_ST, _S.ADJUSTED_BALANCE_MTD),
    "068": (_ST, _S.ADJUSTED_BALANCE_YTD),
    "070": (_ST, _S.ZERO_DAY_FLOAT),
    "072": (_ST, _S.ONE_DAY_FLOAT),
    "073": (_ST, _S.FLOAT_ADJUSTMENT),
    "074": (_ST, _S.TWO_OR_MORE_DAYS_FLOAT),
    "075": (_ST, _S.THREE_OR_MORE_DAYS_FLOAT),
    "076": (_ST, _S.ADJUSTMENT_TO_BALANCES),
    "077": (_ST, _S.AVERAGE_ADJUSTMENT_TO_BALANCES_MTD),
    "078": (_ST, _S.AVERAGE_ADJUSTMENT_TO_BALANCES_YTD),
    "079": (_ST, _S.FOUR_DAY_FLOAT),
    "080": (_ST, _S.FIVE_DAY_FLOAT),
    "081": (_ST, _S.SIX_DAY_FLOAT),
    "082": (_ST, _S.AVERAGE_1_DAY_FLOAT_MTD),
    "083": (_ST, _S.AVERAGE_1_DAY_FLOAT_YTD),
    "084": (_ST, _S.AVERAGE_2_DAY_FLOAT_MTD),
    "085": (_ST, _S.AVERAGE_2_DAY_FLOAT_YTD),
    "086": (_ST, _S.TRANSFER_CALCULATION),
    "100": (_CS, _S.TOTAL_CREDITS),
    "101": (_CS, _S.TOTAL_CREDIT_AMOUNT_MTD),
    "105": (_CS, _S.CREDITS_NOT_DETAILED),
    "106": (_CS, _S.DEPOSITS_SUBJECT_TO_FLOAT),
    "107": (_CS, _S.TOTAL_ADJUSTMENT_CREDITS_YTD),
    "109": (_CS, _S.CURRENT_DAY_TOTAL_LOCKBOX_DEPOSITS),
    "110": (_CS, _S.TOTAL_LOCKBOX_DEPOSITS),
    "120": (_CS, _S.EDI_TRANSACTION_CREDIT),
    "130": (_CS, _S.TOTAL_CONCENTRATION_CREDITS),
    "131": (_CS, _S.TOTAL_DTC_CREDITS),
    "140": (_CS, _S.TOTAL_ACH_CREDITS),
    "146": (_CS, _S.TOTAL_BANK_CARD_DEPOSITS),
    "150": (_CS, _S.TOTAL_PREAUTHORIZED_PAYMENT_CREDITS),
    "160": (_CS, _S.TOTAL_ACH_DISBURSING_FUNDING_CREDITS),
    "162": (_CS, _S.CORPORATE_TRADE_PAYMENT_SETTLEMENT),
    "163": (_CS, _S.CORPORATE_TRADE_PAYMENT_CREDITS),
    "167": (_CS, _S.ACH_SETTLEMENT_CREDITS),
    "170": (_CS, _S.TOTAL_OTHER_CHECK_DEPOSITS),
    "178": (_CS, _S.LIST_POST_CREDITS),
    "180": (_CS, _S.TOTAL_LOAN_PROCEEDS),
    "182": (_CS, _S.TOTAL_BANK_PREPARED_DEPOSITS),
    "185": (_CS, _S.TOTAL_MISCELLANEOUS_DEPOSITS),
    "186": (_CS, _S.TOTAL_CASH_LETTER_CREDITS),
    "188": (_CS, _S.TOTAL_CASH_LETTER_ADJUSTMENTS),
    "190": (_CS, _S.TOTAL_INCOMING_MONEY_TRANSFERS),
    "200": (_CS, _S.TOTAL_AUTOMATIC_TRANSFER_CREDITS),
    "205": (_CS, _S.TOTAL_BOOK_TRANSFER_CREDITS),
    "207": (_CS, _S.TOTAL_INTERNATIONAL_MONEY_TRANSFER_CREDITS),
    "210": (_CS, _S.TOTAL_INTERNATIONAL_CREDITS),
    "215": (_CS, _S.TOTAL_LETTERS_OF_CREDIT),
    "230": (_CS, _S.TOTAL_SECURITY_CREDITS),
    "231": (_CS, _S.TOTAL_COLLECTION_CREDITS),
    "239": (_CS, _S.TOTAL_BANKERS_ACCEPTANCE_CREDITS),
    "245": (_CS, _S.MONTHLY_DIVIDENDS),
    "250": (_CS, _S.TOTAL_CHECKS_POSTED_AND_RETURNED),
    "251": (_CS, _S.TOTAL_DEBIT_REVERSALS),
    "256": (_CS, _S.TOTAL_ACH_RETURN_ITEMS),
    "260": (_CS, _S.TOTAL_REJECTED_CREDITS),
    "270": (_CS, _S.TOTAL_ZBA_CREDITS),
    "271": (_CS, _S.NET_ZERO_BALANCE_AMOUNT),
    "280": (_CS, _S.TOTAL_CONTROLLED_DISBURSING_CREDITS),
    "285": (_CS, _S.TOTAL_DTC_DISBURSING_CREDITS),
    "294": (_CS, _S.TOTAL_ATM_CREDITS),
    "302": (_CS, _S.CORRESPONDENT_BANK_DEPOSIT),
    "303": (_CS, _S.TOTAL_WIRE_TRANSFERS_IN_FF),
    "304": (_CS, _S.TOTAL_WIRE_TRANSFERS_IN_CHF),
    "305": (_CS, _S.TOTAL_FED_FUNDS_SOLD),
    "307": (_CS, _S.TOTAL_TRUST_CREDITS),
    "309": (_CS, _S.TOTAL_VALUE_DATED_FUNDS),
    "310": (_CS, _S.TOTAL_COMMERCIAL_DEPOSITS),
    "315": (_CS, _S.TOTAL_INTERNATIONAL_CREDITS_FF),
    "316": (_CS, _S.TOTAL_INTERNATIONAL_CREDITS_CHF),
    "318": (_CS, _S.TOTAL_FOREIGN_CHECK_PURCHASED),
    "319": (_CS, _S.LATE_DEPOSIT),
    "320": (_CS, _S.TOTAL_SECURITIES_SOLD_FF),
    "321": (_CS, _S.TOTAL_SECURITIES_SOLD_CHF),
    "324": (_CS, _S.TOTAL_SECURITIES_MATURED_FF),
    "325": (_CS, _S.TOTAL_SECURITIES_MATURED_CHF),
    "326": (_CS, _S.TOTAL_SECURITIES_INTEREST),
    "327": (_CS, _S.TOTAL_SECURITIES_MATURED),
    "328": (_CS, _S.TOTAL_SECURITIES_INTEREST_FF),
    "329": (_CS, _S.TOTAL_SECURITIES_INTEREST_CHF),
    "330": (_CS, _S.TOTAL_ESCROW_CREDITS),
    "332": (_CS, _S.TOTAL_MISCELLANEOUS_SECURITIES_CREDITS_FF),
    "336": (_CS, _S.TOTAL_MISCELLANEOUS_SECURITIES_CREDITS_CHF),
    "338": (_CS, _S.TOTAL_SECURITIES_SOLD),
    "340": (_CS, _S.TOTAL_BROKER_DEPOSITS),
    "341": (_CS, _S.TOTAL_BROKER_DEPOSITS_FF),
    "343": (_CS, _S.TOTAL_BROKER_DEPOSITS_CHF),
    "350": (_CS, _S.INVESTMENT_SOLD),
    "352": (_CS, _S.TOTAL_CASH_CENTER_CREDITS),
    "355": (_CS, _S.INVESTMENT_INTEREST),
    "356": (_CS, _S.TOTAL_CREDIT_ADJUSTMENT),
    "360": (_CS, _S.TOTAL_CREDITS_LESS_WIRE_TRANSFER_AND_RETURNED_CHECKS),
    "361": (_CS, _S.GRAND_TOTAL_CREDITS_LESS_GRAND_TOTAL_DEBITS),
    "370": (_CS, _S.TOTAL_BACK_VALUE_CREDITS),
    "385": (_CS, _S.TOTAL_UNIVERSAL_CREDITS),
    "389": (_CS, _S.TOTAL_FREIGHT_PAYMENT_CREDITS),
    "390": (_CS, _S.TOTAL_MISCELLANEOUS_CREDITS),
    "400": (_DS, _S.TOTAL_DEBITS),
    "401": (_DS, _S.TOTAL_DEBIT_AMOUNT_MTD),
    "403": (_DS, _S.TODAYS_TOTAL_DEBITS),
    "405": (_DS, _S.TOTAL_DEBIT_LESS_WIRE_TRANSFERS_AND_CHARGE_BACKS),
    "406": (_DS, _S.DEBITS_NOT_DETAILED),
    "410": (_DS, _S.TOTAL_YTD_ADJUSTMENT),
    "412": (_DS, _S.TOTAL_DEBITS_EXCLUDING_RETURNED_ITEMS),
    "416": (_DS, _S.TOTAL_LOCKBOX_DEBITS),
    "420": (_DS, _S.EDI_TRANSACTION_DEBITS),
    "430": (_DS, _S.TOTAL_PAYABLE_THROUGH_DRAFTS),
    "446": (_DS, _S.TOTAL_ACH_DISBURSEMENT_FUNDING_DEBITS),
    "450": (_DS, _S.TOTAL_ACH_DEBITS),
    "463": (_DS, _S.CORPORATE_TRADE_PAYMENT_DEBITS),
    "465": (_DS, _S.CORPORATE_TRADE_PAYMENT_SETTLEMENT),
    "467": (_DS, _S.ACH_SETTLEMENT_DEBITS),
    "470": (_DS, _S.TOTAL_CHECK_PAID),
    "471": (_DS, _S.TOTAL_CHECK_PAID_CUMULATIVE_MTD),
    "478": (_DS, _S.LIST_POST_DEBITS),
    "480": (_DS, _S.TOTAL_LOAN_PAYMENTS),
    "482": (_DS, _S.TOTAL_BANK_ORIGINATED_DEBITS),
    "486": (_DS, _S.TOTAL_CASH_LETTER_DEBITS),
    "490": (_DS, _S.TOTAL_OUTGOING_MONEY_TRANSFERS),
    "500": (_DS, _S.TOTAL_AUTOMATIC_TRANSFER_DEBITS),
    "505": (_DS, _S.TOTAL_BOOK_TRANSFER_DEBITS),
    "507": (_DS, _S.TOTAL_INTERNATIONAL_MONEY_TRANSFER_DEBITS),
    "510": (_DS, _S.TOTAL_INTERNATIONAL_DEBITS),
    "515": (_DS, _S.TOTAL_LETTERS_OF_CREDIT),
    "530": (_DS, _S.TOTAL_SECURITY_DEBITS),
    "532": (_DS, _S.TOTAL_AMOUNT_OF_SECURITIES_PURCHASED),
    "534": (_DS, _S.TOTAL_MISCELLANEOUS_SECURITIES_DB_FF),
    "536": (_DS, _S.TOTAL_MISCELLANEOUS_SECURITIES_DEBIT_CHF),
    "537": (_DS, _S.TOTAL_COLLECTION_DEBIT),
    "539": (_DS, _S.TOTAL_BANKERS_ACCEPTANCES_DEBIT),
    "550": (_DS, _S.TOTAL_DEPOSITED_ITEMS_RETURNED),
    "551": (_DS, _S.TOTAL_CREDIT_REVERSALS),
    "556": (_DS, _S.TOTAL_ACH_RETURN_ITEMS),
    "560": (_DS, _S.TOTAL_REJECTED_DEBITS),
    "570": (_DS, _S.TOTAL_ZBA_DEBITS),
    "580": (_DS, _S.TOTAL_CONTROLLED_DISBURSING_DEBITS),
    "583": (_DS, _S.TOTAL_DISBURSING_CHECKS_PAID_EARLY_AMOUNT),
    "584": (_DS, _S.TOTAL_DISBURSING_CHECKS_PAID_LATER_AMOUNT),
    "585": (_DS, _S.DISBURSING_FUNDING_REQUIREMENT),
    "586": (_DS, _S.FRB_PRESENTMENT_ESTIMATE),
    "587": (_DS, _S.LATE_DEBITS_AFTER_NOTIFICATION),
    "588": (_DS, _S.TOTAL_DISBURSING_CHECKS_PAID_LAST_AMOUNT),
    "590": (_DS, _S.TOTAL_DTC_DEBITS),
    "594": (_DS, _S.TOTAL_ATM_DEBITS),
    "596": (_DS, _S.TOTAL_APR_DEBITS),
    "601": (_DS, _S.ESTIMATED_TOTAL_DISBURSEMENT),
    "602": (_DS, _S.ADJUSTED_TOTAL_DISBURSEMENT),
    "610": (_DS, _S.TOTAL_FUNDS_REQUIRED),
    "611": (_DS, _S.TOTAL_WIRE_TRANSFERS_OUT_CHF),
    "612": (_DS, _S.TOTAL_WIRE_TRANSFERS_OUT_FF),
    "613": (_DS, _S.TOTAL_INTERNATIONAL_DEBIT_CHF),
    "614": (_DS, _S.TOTAL_INTERNATIONAL_DEBIT_FF),
    "615": (_DS, _S.TOTAL_FEDERAL_RESERVE_BANK_COMMERCIAL_BANK_DEBIT),
    "617": (_DS, _S.TOTAL_SECURITIES_PURCHASED_CHF),
    "618": (_DS, _S.TOTAL_SECURITIES_PURCHASED_FF),
    "621": (_DS, _S.TOTAL_BROKER_DEBITS_CHF),
    "623": (_DS, _S.TOTAL_BROKER_DEBITS_FF),
    "625": (_DS, _S.TOTAL_BROKER_DEBITS),
    "626": (_DS, _S.TOTAL_FED_FUNDS_PURCHASED),
    "628": (_DS, _S.TOTAL_CASH_CENTER_DEBITS),
    "630": (_DS, _S.TOTAL_DEBIT_ADJUSTMENTS),
    "632": (_DS, _S.TOTAL_TRUST_DEBITS),
    "640": (_DS, _S.TOTAL_ESCROW_DEBITS),
    "646": (_DS, _S.TRANSFER_CALCULATION_DEBIT),
    "650": (_DS, _S.INVESTMENTS_PURCHASED),
    "655": (_DS, _S.TOTAL_INVESTMENT_INTEREST_DEBITS),
    "665": (_DS, _S.INTERCEPT_DEBITS),
    "670": (_DS, _S.TOTAL_BACK_VALUE_DEBITS),
    "685": (_DS, _S.TOTAL_UNIVERSAL_DEBITS),
    "689": (_DS, _S.FRB_FREIGHT_PAYMENT_DEBITS),
    "690": (_DS, _S.TOTAL_MISCELLANEOUS_DEBITS),
    "701": (_ST, _S.PRINCIPAL_LOAN_BALANCE),
    "703": (_ST, _S.AVAILABLE_COMMITMENT_AMOUNT),
    "705": (_ST, _S.PAYMENT_AMOUNT_DUE),
    "707": (_ST, _S.PRINCIPAL_AMOUNT_PAST_DUE),
    "709": (_ST, _S.INTEREST_AMOUNT_PAST_DUE),
    "720": (_CS, _S.TOTAL_LOAN_PAYMENT),
    "760": (_DS, _S.LOAN_DISBURSEMENT),
}

# (range, category, subtype) for bank-defined codes
_CUSTOM_RANGES: tuple[tuple[range, AmountCategory, AmountSubtype], ...] = (
    (range(900, 920), _ST, _S.CUSTOM_STATUS),
    (range(920, 960), _CS, _S.CUSTOM_CREDIT_SUMMARY),
    (range(960, 1000), _DS, _S.CUSTOM_DEBIT_SUMMARY),
)


def resolve_amount_type(code: str) -> AmountType:
    """Resolve a summary type code. Never raises; unknown codes are unclassified."""
    known = _AMOUNT_CODES.get(code)
    if known is not None:
        category, subtype = known
        return AmountType(code=code, category=category, subtype=subtype)

    if code.isascii() and code.isdigit():
        n = int(code)
        for codes, category, subtype in _CUSTOM_RANGES:
            if n in codes:
                return AmountType(code=code, category=category, subtype=subtype)

    return AmountType(
        code=code,
        category=AmountCategory.UNCLASSIFIED,
        subtype=AmountSubtype.UNCLASSIFIED,
    )


def known_amount_codes() -> frozenset[str]:
    """Codes present in the standard table (custom ranges excluded)."""
    return frozenset(_AMOUNT_CODES)
