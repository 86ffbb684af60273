"""Closed vocabularies shared by entities, persistence and DTOs.

Values are the strings that cross the HTTP boundary and are stored in the
database, so they must never be renamed.
"""

from enum import Enum


class Role(str, Enum):
    """User roles - a user may hold several."""

    ADMIN = "Admin"
    AGENT = "Agent"
    ADMISSION = "Admission"
    FINANCE = "Finance"
    VISA = "Visa"
    STUDENT = "Student"


EMPLOYEE_ROLES = frozenset(
    {Role.ADMIN, Role.AGENT, Role.ADMISSION, Role.FINANCE, Role.VISA}
)


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


class Country(str, Enum):
    """Destination countries the consultancy processes applications for."""

    UNITED_STATES = "UnitedStates"
    CANADA = "Canada"
    HUNGARY = "Hungary"
    ITALY = "Italy"


class Season(str, Enum):
    """Intake season of an application."""

    FALL = "Fall"
    SPRING = "Spring"
    SUMMER = "Summer"
    WINTER = "Winter"


class ApplicationStatus(str, Enum):
    """Stage an application is currently in."""

    ADMISSION = "Admission"
    ENGLISH_TEST = "EnglishTest"
    DEPOSIT = "Deposit"
    VISA = "Visa"
    VISA_DECISION = "VisaDecision"


class AdmissionStatus(str, Enum):
    PENDING = "Pending"
    APPLYING = "Applying"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"


class EnglishTestRequiredStatus(str, Enum):
    YES = "Yes"
    NO = "No"
    PENDING = "Pending"


class EnglishTestStatus(str, Enum):
    PENDING = "Pending"
    PASSED = "Passed"
    FAILED = "Failed"


class Operation(str, Enum):
    """Kind of change recorded in the audit trail."""

    CREATE = "Create"
    UPDATE = "Update"
    DELETE = "Delete"


class PaymentStatus(str, Enum):
    PENDING = "Pending"
    COMPLETE = "Complete"
    EXPIRED = "Expired"


class NotificationType(str, Enum):
    NORMAL = "Normal"
    CHAT = "Chat"


class AdditionalFileType(str, Enum):
    PASSPORT = "Passport"
    PHOTO = "Photo"
    CERTIFICATE = "Certificate"
    TRANSCRIPT = "Transcript"
    BANK_STATEMENT = "BankStatement"
    RECOMMENDATION_LETTER = "RecommendationLetter"
    OTHER = "Other"


class Relationship(str, Enum):
    """Relationship of a relative to the student."""

    FATHER = "Father"
    MOTHER = "Mother"
    SIBLING = "Sibling"
    SPOUSE = "Spouse"
    GUARDIAN = "Guardian"
    OTHER = "Other"


class ConversationType(str, Enum):
    PRIVATE = "Private"
    FORUM = "Forum"


class EventCategory(str, Enum):
    ADMISSION = "Admission"
    FINANCE = "Finance"
    VISA = "Visa"
    OTHER = "Other"


class VisaPaymentStatus(str, Enum):
    UNPAID = "Unpaid"
    PAID = "Paid"


class DepositPaymentStatus(str, Enum):
    PENDING = "Pending"
    PAID = "Paid"


class InterviewScheduleStatus(str, Enum):
    PENDING = "Pending"
    ATTENDED = "Attended"
    MISSED = "Missed"


class UnitedStatesVisaApplicationStatus(str, Enum):
    PENDING = "Pending"
    DOCUMENTS_RECEIVED = "DocumentsReceived"
    VISA_FEE_FILE_UPLOADED = "VisaFeeFileUploaded"
    VISA_FEE_PAID = "VisaFeePaid"
    INTERVIEW_TRAINING_SCHEDULED = "InterviewTrainingScheduled"
    INTERVIEW_TRAINING_COMPLETE = "InterviewTrainingComplete"
    DEPOSIT_PAYMENT_PENDING = "DepositPaymentPending"
    DEPOSIT_PAYMENT_COMPLETE = "DepositPaymentComplete"
    INTERVIEW_SCHEDULED = "InterviewScheduled"
    INTERVIEW_COMPLETE = "InterviewComplete"
    SEVIS_PAID = "SevisPaid"
    NOTIFIED_USER = "NotifiedUser"


class CanadaVisaApplicationStatus(str, Enum):
    PENDING = "Pending"
    DOCUMENTS_RECEIVED = "DocumentsReceived"
    VISA_APPLICATION_AND_BIOMETRIC_FEE_AMOUNT_SET = (
        "VisaApplicationAndBiometricFeeAmountSet"
    )
    VISA_APPLICATION_AND_BIOMETRIC_FEE_PAID = "VisaApplicationAndBiometricFeePaid"
    DEPOSIT_PAYMENT_PENDING = "DepositPaymentPending"
    DEPOSIT_PAYMENT_COMPLETE = "DepositPaymentComplete"
    CONFIRMATION_SENT = "ConfirmationSent"
    NOTIFIED_USER = "NotifiedUser"


class VisaApplicationAndBiometricFeeStatus(str, Enum):
    PENDING = "Pending"
    ATTENDED = "Attended"
    MISSED = "Missed"


class CalendarColor(str, Enum):
    """Event colors: hex for the web calendar, numeric ids for Google Calendar."""

    DEPOSIT = "#D50000"
    INTERVIEW_TRAINING = "#33B679"
    INTERVIEW = "#F6BF26"
    UNITED_STATES_SERVICE_FEE = "#3F51B5"
    CANADA_SERVICE_FEE = "#616161"
    BIOMETRIC_SUBMISSION = "#8E24AA"
    DEPOSIT_GOOGLE = "11"
    INTERVIEW_TRAINING_GOOGLE = "2"
    INTERVIEW_GOOGLE = "5"
    UNITED_STATES_SERVICE_FEE_GOOGLE = "9"
    CANADA_SERVICE_FEE_GOOGLE = "8"
    BIOMETRIC_SUBMISSION_GOOGLE = "3"
