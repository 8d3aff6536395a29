"""Registration workflow: validate the form, then create user and application."""

import logging

from bono.core.config import Settings, settings
from bono.models.application import Application, ApplicationStatus, Documents
from bono.models.user import User, UserRole
from bono.schemas.auth import UserPublic
from bono.schemas.registration import (
    FieldError,
    RegistrationRequest,
    RegistrationResult,
)
from bono.services.record_store import RecordStore
from bono.utils.validators import (
    password_error_message,
    validate_cedula,
    validate_email,
    validate_name,
    validate_password,
    validate_phone,
)

logger = logging.getLogger(__name__)

FIRST_NAME_MESSAGE = "El nombre debe tener al menos 2 caracteres"
LAST_NAME_MESSAGE = "El apellido debe tener al menos 2 caracteres"
CEDULA_MESSAGE = "Ingresa una cédula válida (XXX-XXXXXXX-X)"
EMAIL_MESSAGE = "Ingresa un email válido"
PHONE_MESSAGE = "Ingresa un teléfono válido (XXX-XXX-XXXX)"
CONFIRM_PASSWORD_MESSAGE = "Las contraseñas no coinciden"
TERMS_MESSAGE = "Debes aceptar los términos y condiciones"
EMAIL_TAKEN_MESSAGE = "Este email ya está registrado"
CEDULA_TAKEN_MESSAGE = "Esta cédula ya está registrada"


def validate_registration_fields(form: RegistrationRequest) -> list[FieldError]:
    """Run every format check on an already trimmed form.

    All failures are collected; none short-circuits the others.
    """
    errors: list[FieldError] = []

    if not validate_name(form.first_name):
        errors.append(FieldError(field="firstName", message=FIRST_NAME_MESSAGE))
    if not validate_name(form.last_name):
        errors.append(FieldError(field="lastName", message=LAST_NAME_MESSAGE))
    if not validate_cedula(form.cedula):
        errors.append(FieldError(field="cedula", message=CEDULA_MESSAGE))
    if not validate_email(form.email):
        errors.append(FieldError(field="email", message=EMAIL_MESSAGE))
    if not validate_phone(form.phone):
        errors.append(FieldError(field="phone", message=PHONE_MESSAGE))

    password_check = validate_password(form.password)
    if not password_check.is_valid:
        errors.append(
            FieldError(
                field="password",
                message=password_error_message(password_check.errors),
            )
        )

    if not form.confirm_password or form.confirm_password != form.password:
        errors.append(
            FieldError(field="confirmPassword", message=CONFIRM_PASSWORD_MESSAGE)
        )

    if not form.terms_accepted:
        errors.append(FieldError(field="terms", message=TERMS_MESSAGE))

    return errors


class RegistrationService:
    """Creates a user together with their first benefit application."""

    def __init__(self, store: RecordStore, config: Settings = settings):
        self.store = store
        self.config = config

    @staticmethod
    def _trimmed(form: RegistrationRequest) -> RegistrationRequest:
        # Passwords are compared as typed.
        return form.model_copy(
            update={
                "first_name": form.first_name.strip(),
                "last_name": form.last_name.strip(),
                "cedula": form.cedula.strip(),
                "email": form.email.strip(),
                "phone": form.phone.strip(),
            }
        )

    def _uniqueness_errors(self, form: RegistrationRequest) -> list[FieldError]:
        errors = []
        if self.store.find_user_by_email(form.email) is not None:
            errors.append(FieldError(field="email", message=EMAIL_TAKEN_MESSAGE))
        if self.store.find_user_by_cedula(form.cedula) is not None:
            errors.append(FieldError(field="cedula", message=CEDULA_TAKEN_MESSAGE))
        return errors

    def _build_records(self, form: RegistrationRequest) -> tuple[User, Application]:
        user = User(
            # Different emails may share a local part; usernames are not deduplicated.
            username=form.email.split("@")[0],
            password=form.password,
            role=UserRole.USER,
            name=f"{form.first_name} {form.last_name}",
            first_name=form.first_name,
            last_name=form.last_name,
            email=form.email,
            cedula=form.cedula,
            phone=form.phone,
        )
        application = Application(
            user_id=user.id,
            status=ApplicationStatus.PENDING,
            amount=self.config.benefit_amount,
            submitted_at=user.created_at,
            documents=Documents(cedula=False, bank_statement=False),
            notes=self.config.initial_application_note,
        )
        return user, application

    async def register(self, form: RegistrationRequest) -> RegistrationResult:
        """Validate the form and, if everything passes, persist both records.

        Nothing is written unless every check passes. The uniqueness check
        and the insert run under the store lock so two concurrent requests
        cannot both claim the same email or cedula.
        """
        form = self._trimmed(form)
        errors = validate_registration_fields(form)

        async with self.store.lock:
            errors.extend(self._uniqueness_errors(form))
            if errors:
                logger.warning(
                    f"Registration rejected: {len(errors)} field error(s) "
                    f"on {sorted({e.field for e in errors})}"
                )
                return RegistrationResult(success=False, errors=errors)

            user, application = self._build_records(form)
            await self.store.save_registration(user, application)

        logger.info(f"Registered user {user.username} with application {application.id}")
        return RegistrationResult(
            success=True,
            user=UserPublic.from_user(user),
            application=application,
        )


def create_registration_service(store: RecordStore) -> RegistrationService:
    """Factory function to create registration service."""
    return RegistrationService(store)
