"""Enumeration types for debt planning entities."""

from enum import Enum


class DebtType(str, Enum):
    CREDIT_CARD = "credit_card"
    PERSONAL_LOAN = "personal_loan"
    HOME_LOAN = "home_loan"
    VEHICLE_LOAN = "vehicle_loan"
    EDUCATION_LOAN = "education_loan"
    BUSINESS_LOAN = "business_loan"
    GOLD_LOAN = "gold_loan"
    OVERDRAFT = "overdraft"
    EMI = "emi"
    OTHER = "other"


class PaymentFrequency(str, Enum):
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"


class Strategy(str, Enum):
    AVALANCHE = "avalanche"  # highest APR first
    SNOWBALL = "snowball"  # smallest balance first
    CUSTOM = "custom"  # caller-supplied priority order


class DtiStatus(str, Enum):
    HEALTHY = "healthy"
    CAUTION = "caution"
    DANGER = "danger"
