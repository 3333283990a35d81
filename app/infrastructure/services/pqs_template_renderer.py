"""PQS prompt template (Jinja): submission fields → prompt for the model."""

from __future__ import annotations

from jinja2 import Environment, Template

from app.application.dtos.assistant import PQSSubmission

_DEFAULT_TEMPLATE = """\
Eres un asistente encargado de formatear un correo electrónico profesional a partir de una Petición, Queja o Sugerencia (PQS) enviada por un colaborador.
El correo será enviado a: {{ company_email }}.

Formatea el contenido del correo de la siguiente manera, manteniendo un tono formal y claro:

Asunto del correo: Nueva PQS Recibida: {{ subject }}

Cuerpo del correo:
Se ha recibido una nueva Petición, Queja o Sugerencia (PQS) a través del portal de colaboradores.

**Detalles de la PQS:**

- **Colaborador:** {{ collaborator_name }}
- **Correo del Colaborador:** {{ collaborator_email }}
- **Fecha de Envío:** (Deja un espacio para la fecha actual)
- **Asunto:** {{ subject }}

**Mensaje:**
{{ message }}

---
Este es un mensaje automático generado por la plataforma ZYCLE. Se recomienda dar seguimiento a esta solicitud a la brevedad.
"""


class PQSTemplateRenderer:
    """Renders the PQS formatting prompt from a submission."""

    def __init__(self, template: str | None = None) -> None:
        self._env = Environment(autoescape=False)
        self._template: Template = self._env.from_string(template or _DEFAULT_TEMPLATE)

    def render(self, submission: PQSSubmission) -> str:
        return self._template.render(
            collaborator_name=submission.collaborator_name,
            collaborator_email=submission.collaborator_email,
            subject=submission.subject,
            message=submission.message,
            company_email=submission.company_email,
        )
