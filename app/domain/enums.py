"""Domain enumerations for the ZYCLE application.

Enums represent fixed sets of domain values. Stored values keep the
Spanish literals the business uses (e.g. payment methods, loan status).
"""

from enum import Enum


class PaymentMethod(str, Enum):
    """How an invoice was paid. Purchases allow only cash and Nequi."""

    CASH = "efectivo"
    NEQUI = "nequi"
    CHECK = "cheque"


class SupplierType(str, Enum):
    """Who a purchase was made from: a walk-in supplier or a registered associate."""

    GENERAL = "general"
    ASSOCIATE = "asociado"


class BeneficiaryType(str, Enum):
    """Loan beneficiary kind."""

    ASSOCIATE = "asociado"
    COLLABORATOR = "colaborador"


class LoanStatus(str, Enum):
    """Loan lifecycle: pending until the outstanding balance reaches zero."""

    PENDING = "Pendiente"
    PAID = "Pagado"


class SourceType(str, Enum):
    """Whether a source point sells or donates its material."""

    SALE = "venta"
    DONATION = "donacion"


class VehicleType(str, Enum):
    TRUCK = "camion"
    PICKUP = "camioneta"
    MOTORCYCLE = "moto"
    MOTOCARRO = "motocarro"
    OTHER = "otro"


class IdentificationType(str, Enum):
    """Colombian identification document type (stored as its numeric key)."""

    CC = "1"
    CE = "2"
    PASSPORT = "3"
    NIT = "4"

    @property
    def label(self) -> str:
        """Short label used in reports (CC, CE, Pasaporte, NIT)."""
        return _IDENTIFICATION_LABELS[self]


_IDENTIFICATION_LABELS = {
    IdentificationType.CC: "CC",
    IdentificationType.CE: "CE",
    IdentificationType.PASSPORT: "Pasaporte",
    IdentificationType.NIT: "NIT",
}


class AttendanceType(str, Enum):
    ENTRY = "entrada"
    EXIT = "salida"


class AttendanceMethod(str, Enum):
    QR = "qr"
    GPS = "gps"
    MANUAL = "manual"


class CashBoxStatus(str, Enum):
    OPEN = "Abierta"
    CLOSED = "Cerrada"


class ExpenseCategory(str, Enum):
    FUEL = "combustible"
    TOLLS = "peajes"
    GENERAL = "general"


class ReportPeriod(str, Enum):
    """Period for the tonnage report, always ending today."""

    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    ALL = "all"


class ExportDataset(str, Enum):
    """Tables that can be downloaded as a spreadsheet."""

    COLLABORATORS = "colaboradores"
    ASSOCIATES = "asociados"
    SOURCES = "fuentes"
    MATERIALS = "materiales"
    PURCHASES = "compras"
    SALES = "ventas"


class ChatRole(str, Enum):
    """Author of a conversation turn sent to the assistant."""

    USER = "user"
    MODEL = "model"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid role values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [role.value for role in cls]
