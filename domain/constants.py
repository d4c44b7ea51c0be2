"""
This module contains centralized constants used throughout the application,
ensuring a single source of truth for field labels, export format, filter flags
and the accepted login credentials.
"""
import logging

PAGE_TITLE = "Plataforma de Registro"

LOG_LEVEL = logging.INFO

# Attribute name -> human readable label. Order is the CSV column order.
FIELD_LABELS = {
    "id": "ID",
    "correl": "Correl",
    "cedula": "Cédula",
    "nombre_apellido": "Nombre y Apellido",
    "ciudad_residencia": "Ciudad de Residencia",
    "pais": "País",
    "censo_tipo": "Censo/Tipo",
    "afiliado": "Afiliado",
    "simpatizante": "Simpatizante",
    "cod_centro_ee": "Cód. Centro EE",
    "celular": "Celular",
    "telefono_fijo": "Teléfono Fijo",
    "email": "Email",
    "usuario_opcional": "Usuario Opcional",
    "cedula_admin": "Cédula Admin",
}

# Labels used on the entry form (slightly more descriptive than the CSV headers)
FORM_LABELS = {
    "cedula": "Cédula (sin puntos)",
    "nombre_apellido": "Nombre y Apellido",
    "ciudad_residencia": "Ciudad de Residencia",
    "pais": "País",
    "cod_centro_ee": "Cód. Centro EE",
    "celular": "Celular",
    "telefono_fijo": "Teléfono Fijo",
    "email": "Email (Solo Gmail)",
    "usuario_opcional": "Usuario Opcional (Gmail)",
    "cedula_admin": "Cédula Administrador",
    "censo_tipo": "Censo/Tipo",
    "afiliado": "Afiliado",
    "simpatizante": "Simpatizante",
}

BOOLEAN_FIELDS = ("censo_tipo", "afiliado", "simpatizante")

REQUIRED_FIELDS = ("cedula", "cedula_admin")

# Flags the data table can be filtered by, in the order the checkboxes appear.
FILTER_FLAGS = ("afiliado", "simpatizante", "censo_tipo")

CORREL_WIDTH = 5

# --- CSV export ---
CSV_TRUE = "Sí"
CSV_FALSE = "No"
CSV_BOM = "\ufeff"
EXPORT_PREFIX = "registros"
EXPORT_MIME = "text/csv"

# --- Messages ---
MSG_REQUIRED = "Por favor, complete los campos obligatorios: Cédula y Cédula Administrador."
MSG_LOGIN_FAILED = "Usuario o contraseña incorrectos."
MSG_EMPTY_STORE = "No hay registros para mostrar."
MSG_NO_MATCHES = "No se encontraron registros que coincidan con su búsqueda o filtros."
MSG_NOTHING_TO_EXPORT = "Nada que exportar"

# Accepted (username, password) pairs. Both "Directiva" pairs stay valid.
CREDENTIALS = (
    ("admin", "password"),
    ("Directiva", "SomosGobierno"),
    ("Daniel", "LedebouncafeaAdri"),
)

# Seed roster loaded into every new data-entry session.
SAMPLE_REGISTRANTS = [
    {
        "id": 1,
        "correl": "00001",
        "cedula": "3111111",
        "nombre_apellido": "Juan Pérez",
        "ciudad_residencia": "Caracas",
        "pais": "Venezuela",
        "censo_tipo": True,
        "afiliado": True,
        "simpatizante": False,
        "cod_centro_ee": "10101001",
        "celular": "1929430111",
        "telefono_fijo": "584141234567",
        "email": "usuario@gmail.com",
        "usuario_opcional": "",
        "cedula_admin": "5000000",
    },
]
