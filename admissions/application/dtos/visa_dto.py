"""Visa processing DTOs for Canada and the United States."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from admissions.application.dtos.common import (
    IsoDateTime,
    Number,
    RequestDTO,
    ResponseDTO,
)
from admissions.application.dtos.shared_dto import ApplicationSummaryDTO
from admissions.domain.enums import (
    CanadaVisaApplicationStatus,
    DepositPaymentStatus,
    InterviewScheduleStatus,
    UnitedStatesVisaApplicationStatus,
    VisaApplicationAndBiometricFeeStatus,
    VisaPaymentStatus,
)

# === CANADA ===


class CreateCanadaVisaDTO(RequestDTO):
    application_id: UUID


class EditCanadaVisaDTO(RequestDTO):
    id: UUID
    visa_application_status: Optional[CanadaVisaApplicationStatus] = None
    required_documents_requested: Optional[bool] = None
    required_documents_received: Optional[bool] = None
    visa_application_and_biometric_fee_amount: Optional[Number] = None
    visa_application_and_biometric_fee: Optional[VisaPaymentStatus] = None
    biometric_submission_date: Optional[IsoDateTime] = None
    service_fee_deposit_date: Optional[IsoDateTime] = None
    service_fee_deposit_payment_status: Optional[DepositPaymentStatus] = None
    visa_application_and_biometric_submitted: Optional[
        VisaApplicationAndBiometricFeeStatus
    ] = None
    payment_confirmation: Optional[str] = None
    application_confirmation: Optional[str] = None
    confirmation_sent: Optional[bool] = None
    confirmation_received: Optional[bool] = None
    visa_accepted: Optional[bool] = None
    visa_status_notification_sent: Optional[bool] = None
    visa_status_notification_sent_at: Optional[IsoDateTime] = None


class CanadaVisaDTO(ResponseDTO):
    id: UUID
    required_documents_requested: bool = False
    required_documents_received: bool = False
    visa_application_and_biometric_fee_amount: Optional[float] = None
    visa_application_and_biometric_fee: VisaPaymentStatus = VisaPaymentStatus.UNPAID
    biometric_submission_date: Optional[datetime] = None
    service_fee_deposit_date: Optional[datetime] = None
    service_fee_deposit_payment_status: DepositPaymentStatus = (
        DepositPaymentStatus.PENDING
    )
    visa_application_and_biometric_submitted: VisaApplicationAndBiometricFeeStatus = (
        VisaApplicationAndBiometricFeeStatus.PENDING
    )
    payment_confirmation_file_uri: Optional[str] = None
    application_confirmation_file_uri: Optional[str] = None
    confirmation_sent: bool = False
    confirmation_received: bool = False
    visa_accepted: Optional[bool] = None
    visa_status_notification_sent: bool = False
    visa_status_notification_sent_at: Optional[datetime] = None
    visa_application_status: CanadaVisaApplicationStatus = (
        CanadaVisaApplicationStatus.PENDING
    )
    application: Optional[ApplicationSummaryDTO] = None


# === UNITED STATES ===


class CreateUnitedStatesVisaDTO(RequestDTO):
    application_id: UUID
    visa_fee_payment_status: VisaPaymentStatus = VisaPaymentStatus.UNPAID
    sevis_payment_status: VisaPaymentStatus = VisaPaymentStatus.UNPAID


class EditUnitedStatesVisaDTO(RequestDTO):
    id: UUID
    visa_application_status: Optional[UnitedStatesVisaApplicationStatus] = None
    required_documents_requested: Optional[bool] = None
    required_documents_received: Optional[bool] = None
    visa_fee_file_uri: Optional[str] = None
    visa_fee_payment_status: Optional[VisaPaymentStatus] = None
    service_fee_deposit_payment_status: Optional[DepositPaymentStatus] = None
    interview_training_schedule_complete: Optional[bool] = None
    interview_schedule: Optional[IsoDateTime] = None
    interview_attended: Optional[bool] = None
    sevis_payment_status: Optional[VisaPaymentStatus] = None
    visa_accepted: Optional[bool] = None
    visa_status_notification_sent: Optional[bool] = None
    visa_status_notification_sent_at: Optional[IsoDateTime] = None


class CreateInterviewTrainingScheduleDTO(RequestDTO):
    united_states_visa_id: UUID
    date: IsoDateTime


class EditInterviewTrainingScheduleDTO(RequestDTO):
    id: UUID
    date: Optional[IsoDateTime] = None
    status: Optional[InterviewScheduleStatus] = None


class InterviewTrainingScheduleDTO(ResponseDTO):
    id: UUID
    date: datetime
    status: InterviewScheduleStatus = InterviewScheduleStatus.PENDING


class UnitedStatesVisaDTO(ResponseDTO):
    id: UUID
    visa_application_status: UnitedStatesVisaApplicationStatus = (
        UnitedStatesVisaApplicationStatus.PENDING
    )
    required_documents_requested: bool = False
    required_documents_received: bool = False
    visa_fee_file_uri: Optional[str] = None
    visa_fee_payment_status: VisaPaymentStatus = VisaPaymentStatus.UNPAID
    interview_training_schedule_complete: bool = False
    interview_schedule: Optional[datetime] = None
    service_fee_deposit_date: Optional[datetime] = None
    service_fee_deposit_payment_status: DepositPaymentStatus = (
        DepositPaymentStatus.PENDING
    )
    interview_attended: bool = False
    sevis_payment_status: VisaPaymentStatus = VisaPaymentStatus.UNPAID
    visa_status_notification_sent: bool = False
    visa_status_notification_sent_at: Optional[datetime] = None
    visa_accepted: Optional[bool] = None
    application: Optional[ApplicationSummaryDTO] = None
    interview_training_schedules: list[InterviewTrainingScheduleDTO] = []
