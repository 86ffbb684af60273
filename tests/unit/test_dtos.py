"""Unit tests for DTO validation.

Every request DTO rejects payloads missing a required field, restricts enum
fields to their members, lower-cases emails before validating them and lets
optional fields be omitted. Response DTOs carry nested shapes intact.
"""

import math
from datetime import UTC, datetime
from uuid import uuid4

import pytest
from pydantic import ValidationError
from pydantic.alias_generators import to_snake

from admissions.application.dtos.additional_student_files_dto import (
    CreateAdditionalStudentFilesDTO,
)
from admissions.application.dtos.application_dto import (
    ApplicationDTO,
    ApplicationFilterDTO,
    CreateApplicationDTO,
    EditApplicationDTO,
)
from admissions.application.dtos.audit_dto import CreateAuditDTO
from admissions.application.dtos.auth_dto import (
    ChangePasswordDTO,
    EditGoogleTokenDTO,
    LoginDTO,
    ResetPasswordDTO,
    StudentSignupDTO,
)
from admissions.application.dtos.common import ISO_DATETIME_MESSAGE, PageDTO
from admissions.application.dtos.conversation_dto import ConversationWithoutMessagesDTO
from admissions.application.dtos.deposit_dto import CreateDepositDTO
from admissions.application.dtos.education_background_dto import (
    CreateEducationBackgroundDTO,
)
from admissions.application.dtos.employee_dto import (
    CreateEmployeeDTO,
    EditEmployeeDTO,
    EmployeeDTO,
)
from admissions.application.dtos.english_test_dto import CreateEnglishTestDTO, EditEnglishTestDTO
from admissions.application.dtos.message_dto import CreateMessageDTO
from admissions.application.dtos.relation_dto import CreateStudentRelationsDTO
from admissions.application.dtos.student_dto import (
    CreateStudentDTO,
    StudentDTO,
    StudentFilterDTO,
)
from admissions.application.dtos.user_dto import UserDTO
from admissions.application.dtos.visa_dto import (
    CanadaVisaDTO,
    CreateUnitedStatesVisaDTO,
    EditCanadaVisaDTO,
    EditInterviewTrainingScheduleDTO,
    EditUnitedStatesVisaDTO,
)
from admissions.domain.entities.application import Application
from admissions.domain.entities.employee import Employee
from admissions.domain.entities.student import Student, StudentAddress
from admissions.domain.entities.user import User
from admissions.domain.enums import (
    AdditionalFileType,
    AdmissionStatus,
    ApplicationStatus,
    CanadaVisaApplicationStatus,
    Country,
    DepositPaymentStatus,
    EnglishTestRequiredStatus,
    EnglishTestStatus,
    Gender,
    InterviewScheduleStatus,
    Operation,
    PaymentStatus,
    Relationship,
    Role,
    Season,
    UnitedStatesVisaApplicationStatus,
    VisaApplicationAndBiometricFeeStatus,
    VisaPaymentStatus,
)

pytestmark = pytest.mark.unit


def employee_payload(**overrides) -> dict:
    payload = {
        "email": "hana@example.com",
        "roles": ["Agent"],
        "password": "S3cure!pass",
        "firstName": "Hana",
        "lastName": "Tesfaye",
        "gender": "Female",
        "phoneNumber": "+251911234567",
        "dateOfBirth": "1994-09-01T00:00:00Z",
    }
    payload.update(overrides)
    return payload


def signup_payload(**overrides) -> dict:
    payload = {
        "email": "abebe@example.com",
        "password": "S3cure!pass",
        "firstName": "Abebe",
        "lastName": "Kebede",
        "gender": "Male",
        "region": "Addis Ababa",
        "city": "Addis Ababa",
        "subCity": "Bole",
        "woreda": "03",
        "kebele": "12",
        "houseNumber": "1123",
    }
    payload.update(overrides)
    return payload


def error_fields(exc_info) -> set:
    return {error["loc"][0] for error in exc_info.value.errors()}


# === REQUIRED FIELDS ===


@pytest.mark.parametrize(
    "missing",
    ["email", "roles", "password", "firstName", "lastName", "gender", "phoneNumber", "dateOfBirth"],
)
def test_create_employee_rejects_missing_required_field(missing):
    payload = employee_payload()
    del payload[missing]

    with pytest.raises(ValidationError) as exc_info:
        CreateEmployeeDTO.model_validate(payload)

    assert error_fields(exc_info) == {missing}


def test_create_employee_accepts_complete_payload():
    dto = CreateEmployeeDTO.model_validate(employee_payload())

    assert dto.first_name == "Hana"
    assert dto.roles == [Role.AGENT]
    assert dto.date_of_birth == datetime(1994, 9, 1, tzinfo=UTC)


@pytest.mark.parametrize("missing", ["region", "houseNumber", "kebele", "gender"])
def test_student_signup_rejects_missing_required_field(missing):
    payload = signup_payload()
    del payload[missing]

    with pytest.raises(ValidationError) as exc_info:
        StudentSignupDTO.model_validate(payload)

    assert error_fields(exc_info) == {missing}


def test_create_application_requires_student_id():
    with pytest.raises(ValidationError) as exc_info:
        CreateApplicationDTO.model_validate(
            {"country": "Canada", "educationalLevel": "Masters", "fieldOfStudy": "Nursing"}
        )

    assert error_fields(exc_info) == {"studentId"}


def test_blank_required_string_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        CreateEmployeeDTO.model_validate(employee_payload(firstName="   "))

    assert error_fields(exc_info) == {"firstName"}


def test_empty_role_list_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        CreateEmployeeDTO.model_validate(employee_payload(roles=[]))

    assert error_fields(exc_info) == {"roles"}


# === ENUM FIELDS ===


@pytest.mark.parametrize("gender", list(Gender))
def test_gender_accepts_every_member(gender):
    dto = StudentSignupDTO.model_validate(signup_payload(gender=gender.value))

    assert dto.gender is gender


@pytest.mark.parametrize("value", ["Other", "male", ""])
def test_gender_rejects_non_members(value):
    with pytest.raises(ValidationError) as exc_info:
        StudentSignupDTO.model_validate(signup_payload(gender=value))

    assert error_fields(exc_info) == {"gender"}


@pytest.mark.parametrize("role", list(Role))
def test_roles_accept_every_member(role):
    dto = CreateEmployeeDTO.model_validate(employee_payload(roles=[role.value]))

    assert dto.roles == [role]


def test_roles_reject_unknown_role():
    with pytest.raises(ValidationError):
        CreateEmployeeDTO.model_validate(employee_payload(roles=["Agent", "Superuser"]))


@pytest.mark.parametrize("country", list(Country))
@pytest.mark.parametrize("intake", list(Season))
def test_application_accepts_every_country_and_intake(country, intake):
    dto = CreateApplicationDTO.model_validate(
        {
            "country": country.value,
            "educationalLevel": "Bachelors",
            "fieldOfStudy": "Nursing",
            "studentId": str(uuid4()),
            "intake": intake.value,
        }
    )

    assert dto.country is country
    assert dto.intake is intake


def test_application_rejects_unknown_country():
    with pytest.raises(ValidationError) as exc_info:
        CreateApplicationDTO.model_validate(
            {
                "country": "Germany",
                "educationalLevel": "Bachelors",
                "fieldOfStudy": "Nursing",
                "studentId": str(uuid4()),
            }
        )

    assert error_fields(exc_info) == {"country"}


@pytest.mark.parametrize("relationship", list(Relationship))
def test_relationship_accepts_every_member(relationship):
    dto = CreateStudentRelationsDTO.model_validate(
        {
            "studentId": str(uuid4()),
            "firstName": "Almaz",
            "lastName": "Kebede",
            "relationship": relationship.value,
        }
    )

    assert dto.relationship is relationship


ENUM_FIELDS = [
    (
        CreateAuditDTO,
        {"entity": "student", "recordId": "1", "userId": str(uuid4()), "previousValues": "{}"},
        "operation",
        Operation,
    ),
    (EditApplicationDTO, {"id": str(uuid4())}, "applicationStatus", ApplicationStatus),
    (EditApplicationDTO, {"id": str(uuid4())}, "admissionStatus", AdmissionStatus),
    (EditApplicationDTO, {"id": str(uuid4())}, "englishTestRequired", EnglishTestRequiredStatus),
    (ApplicationFilterDTO, {}, "applicationStatus", ApplicationStatus),
    (ApplicationFilterDTO, {}, "admissionStatus", AdmissionStatus),
    (EditEnglishTestDTO, {"applicationId": str(uuid4())}, "hasPassed", EnglishTestStatus),
    (CreateDepositDTO, {"expiration": "2025-01-31"}, "status", PaymentStatus),
    (CreateAdditionalStudentFilesDTO, {}, "fileType", AdditionalFileType),
    (
        EditUnitedStatesVisaDTO,
        {"id": str(uuid4())},
        "visaApplicationStatus",
        UnitedStatesVisaApplicationStatus,
    ),
    (EditUnitedStatesVisaDTO, {"id": str(uuid4())}, "visaFeePaymentStatus", VisaPaymentStatus),
    (
        EditUnitedStatesVisaDTO,
        {"id": str(uuid4())},
        "serviceFeeDepositPaymentStatus",
        DepositPaymentStatus,
    ),
    (EditCanadaVisaDTO, {"id": str(uuid4())}, "visaApplicationStatus", CanadaVisaApplicationStatus),
    (
        EditCanadaVisaDTO,
        {"id": str(uuid4())},
        "visaApplicationAndBiometricSubmitted",
        VisaApplicationAndBiometricFeeStatus,
    ),
    (EditInterviewTrainingScheduleDTO, {"id": str(uuid4())}, "status", InterviewScheduleStatus),
]


@pytest.mark.parametrize(
    "dto_cls, base, field, member",
    [
        pytest.param(dto_cls, base, field, member, id=f"{dto_cls.__name__}.{field}={member.value}")
        for dto_cls, base, field, enum_cls in ENUM_FIELDS
        for member in enum_cls
    ],
)
def test_status_fields_accept_every_member(dto_cls, base, field, member):
    dto = dto_cls.model_validate(base | {field: member.value})

    assert getattr(dto, to_snake(field)) is member


@pytest.mark.parametrize(
    "dto_cls, base, field",
    [
        pytest.param(dto_cls, base, field, id=f"{dto_cls.__name__}.{field}")
        for dto_cls, base, field, _ in ENUM_FIELDS
    ],
)
@pytest.mark.parametrize("value", ["Unknown", "pending", ""])
def test_status_fields_reject_non_members(dto_cls, base, field, value):
    with pytest.raises(ValidationError) as exc_info:
        dto_cls.model_validate(base | {field: value})

    assert error_fields(exc_info) == {field}


def test_visa_payment_statuses_default_to_unpaid():
    dto = CreateUnitedStatesVisaDTO.model_validate({"applicationId": str(uuid4())})

    assert dto.visa_fee_payment_status is VisaPaymentStatus.UNPAID
    assert dto.sevis_payment_status is VisaPaymentStatus.UNPAID


# === EMAIL LOWER-CASING ===


@pytest.mark.parametrize(
    "build",
    [
        lambda email: LoginDTO.model_validate({"email": email, "password": "x"}),
        lambda email: CreateEmployeeDTO.model_validate(employee_payload(email=email)),
        lambda email: StudentSignupDTO.model_validate(signup_payload(email=email)),
        lambda email: ChangePasswordDTO.model_validate(
            {"email": email, "currentPassword": "S3cure!pass", "newPassword": "N3w!passw"}
        ),
        lambda email: CreateEnglishTestDTO.model_validate(
            {
                "applicationId": str(uuid4()),
                "practiceLink": "https://practice.example.com",
                "email": email,
                "password": "portal",
            }
        ),
    ],
)
def test_emails_are_lower_cased(build):
    dto = build("Mixed.Case@Example.COM")

    assert dto.email == "mixed.case@example.com"


def test_email_is_still_validated_after_lower_casing():
    with pytest.raises(ValidationError) as exc_info:
        LoginDTO.model_validate({"email": "NOT-AN-EMAIL", "password": "x"})

    assert error_fields(exc_info) == {"email"}


def test_optional_email_is_lower_cased_when_present():
    dto = EditEmployeeDTO.model_validate({"id": str(uuid4()), "email": "NEW@EXAMPLE.COM"})

    assert dto.email == "new@example.com"


# === OPTIONAL FIELDS ===


def test_edit_employee_needs_only_id():
    employee_id = uuid4()

    dto = EditEmployeeDTO.model_validate({"id": str(employee_id)})

    assert dto.id == employee_id
    assert dto.model_dump(exclude={"id"}, exclude_none=True) == {}


def test_edit_application_needs_only_id():
    dto = EditApplicationDTO.model_validate({"id": str(uuid4())})

    assert dto.application_status is None
    assert dto.admission_status is None


def test_optional_fields_may_be_omitted_on_create():
    dto = StudentSignupDTO.model_validate(signup_payload())

    assert dto.phone_number is None
    assert dto.date_of_birth is None


# === FIELD SHAPES ===


def test_snake_case_keys_are_accepted_too():
    payload = employee_payload()
    payload["first_name"] = payload.pop("firstName")

    dto = CreateEmployeeDTO.model_validate(payload)

    assert dto.first_name == "Hana"


def test_unknown_keys_are_ignored():
    dto = LoginDTO.model_validate({"email": "a@example.com", "password": "x", "isAdmin": True})

    assert not hasattr(dto, "isAdmin")


def test_login_password_is_not_stripped():
    dto = LoginDTO.model_validate({"email": "a@example.com", "password": " S3cure!pass "})

    assert dto.password == " S3cure!pass "


def test_reset_token_is_not_stripped():
    dto = ResetPasswordDTO.model_validate(
        {"email": "a@example.com", "password": "N3w!passw", "resetPasswordToken": " tok "}
    )

    assert dto.reset_password_token == " tok "


@pytest.mark.parametrize("dto_cls", [LoginDTO, ResetPasswordDTO])
def test_empty_secret_is_rejected(dto_cls):
    payload = {"email": "a@example.com", "password": "", "resetPasswordToken": ""}
    if dto_cls is ResetPasswordDTO:
        payload["password"] = "N3w!passw"

    with pytest.raises(ValidationError):
        dto_cls.model_validate(payload)


def test_filters_carry_paging_defaults():
    dto = StudentFilterDTO.model_validate({"isActive": "true"})

    assert dto.is_active is True
    assert (dto.skip, dto.limit) == (0, 100)


@pytest.mark.parametrize("paging", [{"skip": -1}, {"limit": 0}, {"limit": 501}])
def test_paging_bounds_are_enforced(paging):
    with pytest.raises(ValidationError) as exc_info:
        PageDTO.model_validate(paging)

    assert error_fields(exc_info) == set(paging)


def test_phone_number_separators_are_stripped():
    dto = CreateEmployeeDTO.model_validate(employee_payload(phoneNumber="+251 (911) 23-45.67"))

    assert dto.phone_number == "+251911234567"


@pytest.mark.parametrize("phone", ["0911234567", "+12", "+2519112345678901234", "phone"])
def test_phone_number_must_be_international(phone):
    with pytest.raises(ValidationError) as exc_info:
        CreateEmployeeDTO.model_validate(employee_payload(phoneNumber=phone))

    assert error_fields(exc_info) == {"phoneNumber"}


@pytest.mark.parametrize(
    "password, reason",
    [
        ("Sh0rt!", "at least 8"),
        ("NOLOWER1!", "lowercase"),
        ("noupper1!", "uppercase"),
        ("NoDigits!", "digit"),
        ("NoSymbol1", "symbol"),
    ],
)
def test_weak_passwords_are_rejected(password, reason):
    with pytest.raises(ValidationError) as exc_info:
        StudentSignupDTO.model_validate(signup_payload(password=password))

    assert reason in exc_info.value.errors()[0]["msg"]


@pytest.mark.parametrize("value", ["12/01/1990", "yesterday", "1990-13-45"])
def test_invalid_dates_report_iso_message(value):
    with pytest.raises(ValidationError) as exc_info:
        CreateEmployeeDTO.model_validate(employee_payload(dateOfBirth=value))

    error = exc_info.value.errors()[0]
    assert error["loc"] == ("dateOfBirth",)
    assert error["msg"] == ISO_DATETIME_MESSAGE


def test_date_only_iso_string_is_accepted():
    dto = CreateDepositDTO.model_validate({"expiration": "2025-01-31"})

    assert dto.expiration.date().isoformat() == "2025-01-31"


def test_gpa_rejects_nan_but_rank_allows_it():
    base = {
        "studentId": str(uuid4()),
        "institution": "Addis Ababa University",
        "degree": "BSc",
        "startDate": "2018-09-01T00:00:00Z",
    }

    with pytest.raises(ValidationError) as exc_info:
        CreateEducationBackgroundDTO.model_validate(base | {"gpa": float("nan")})
    assert error_fields(exc_info) == {"gpa"}

    dto = CreateEducationBackgroundDTO.model_validate(base | {"rank": float("nan")})
    assert math.isnan(dto.rank)


@pytest.mark.parametrize("content, valid", [("", False), ("x", True), ("x" * 1000, True), ("x" * 1001, False)])
def test_message_content_length(content, valid):
    payload = {"content": content, "senderId": str(uuid4()), "recipientId": str(uuid4())}

    if valid:
        assert CreateMessageDTO.model_validate(payload).content == content
    else:
        with pytest.raises(ValidationError):
            CreateMessageDTO.model_validate(payload)


def test_google_token_keeps_snake_case_keys():
    dto = EditGoogleTokenDTO.model_validate({"access_token": "ya29.token", "expires_in": 3599})

    assert dto.access_token == "ya29.token"
    assert dto.expires_in == 3599


def test_create_student_payload_carries_first_application():
    dto = CreateStudentDTO.model_validate(
        signup_payload(
            branch="Bole", country="Canada", educationalLevel="Masters", fieldOfStudy="Nursing"
        )
    )

    assert dto.country is Country.CANADA
    assert dto.educational_level == "Masters"


# === NESTED RESPONSES ===


@pytest.fixture
def user() -> User:
    return User(
        id=uuid4(),
        email="hana@example.com",
        first_name="Hana",
        last_name="Tesfaye",
        password_hash="HASHED:S3cure!pass",
        roles=[Role.AGENT],
        phone_number="+251911234567",
    )


@pytest.fixture
def student() -> Student:
    student_user = User(
        id=uuid4(),
        email="abebe@example.com",
        first_name="Abebe",
        last_name="Kebede",
        password_hash="HASHED:S3cure!pass",
        roles=[Role.STUDENT],
    )
    return Student(
        id=uuid4(),
        first_name="Abebe",
        last_name="Kebede",
        gender=Gender.MALE,
        user=student_user,
        student_address=StudentAddress(region="Addis Ababa", house_number="1123", sub_city="Bole"),
    )


def test_employee_dto_round_trips_nested_user(user):
    employee = Employee(
        id=uuid4(), first_name="Hana", last_name="Tesfaye", gender=Gender.FEMALE, user=user
    )

    dto = EmployeeDTO.model_validate(employee)
    body = dto.model_dump(mode="json", by_alias=True)

    assert body["user"]["firstName"] == "Hana"
    assert body["user"]["roles"] == ["Agent"]
    assert "passwordHash" not in body["user"]
    assert EmployeeDTO.model_validate(body).model_dump() == dto.model_dump()


def test_user_dto_keeps_google_keys_in_snake_case(user):
    body = UserDTO.model_validate(user).model_dump(by_alias=True)

    assert "access_token" in body
    assert "expires_in" in body
    assert "phoneNumber" in body


def test_student_dto_nests_address_user_and_applications(student):
    application = Application(
        id=uuid4(),
        student_id=student.id,
        country=Country.HUNGARY,
        educational_level="Bachelors",
        field_of_study="Medicine",
        intake=Season.FALL,
    )
    student.applications = [application]

    dto = StudentDTO.model_validate(student)
    body = dto.model_dump(mode="json", by_alias=True)

    assert body["studentAddress"]["subCity"] == "Bole"
    assert body["user"]["email"] == "abebe@example.com"
    assert body["applications"][0]["country"] == "Hungary"
    assert body["applications"][0]["applicationStatus"] == "Admission"
    assert body["studentRelations"] == []
    assert StudentDTO.model_validate(body).model_dump() == dto.model_dump()


def test_application_dto_nests_student_summary(student):
    application = Application(
        id=uuid4(),
        student_id=student.id,
        country=Country.ITALY,
        educational_level="Masters",
        field_of_study="Architecture",
        student=student,
    )

    body = ApplicationDTO.model_validate(application).model_dump(mode="json", by_alias=True)

    assert body["student"]["firstName"] == "Abebe"
    assert body["admissionStatus"] == "Pending"
    assert body["englishTestRequired"] == "Pending"


def test_canada_visa_defaults():
    dto = CanadaVisaDTO.model_validate({"id": str(uuid4())})

    assert dto.visa_application_and_biometric_fee is VisaPaymentStatus.UNPAID
    assert dto.confirmation_sent is False


def test_conversation_count_uses_underscore_key():
    dto = ConversationWithoutMessagesDTO.model_validate(
        {"id": str(uuid4()), "type": "Private", "_count": 3}
    )

    assert dto.count == 3
    assert dto.model_dump(by_alias=True)["_count"] == 3
