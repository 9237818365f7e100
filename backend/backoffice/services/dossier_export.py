"""
Export d'une formation personnalisée en document HTML imprimable (dossier programme).

Chaque section n'apparaît que si elle est renseignée ; toutes les valeurs
sont échappées avant insertion dans le HTML.
"""

import re
from datetime import date
from html import escape
from typing import List, Optional

from backoffice.schemas.custom_programme import CustomProgramme

ORGANISATION_FOOTER = "GestionMax Formation - Organisme de formation professionnelle certifié Qualiopi"

_STYLE = """
        body { font-family: Arial, sans-serif; line-height: 1.6; margin: 0; padding: 20px; color: #333; }
        .header { text-align: center; border-bottom: 3px solid #1f3b8e; padding-bottom: 20px; margin-bottom: 30px; }
        .header h1 { color: #1f3b8e; margin: 0; font-size: 24px; }
        .header .code { color: #666; font-size: 14px; margin-top: 5px; }
        .section { margin-bottom: 25px; }
        .section h2 { color: #1f3b8e; border-bottom: 1px solid #ddd; padding-bottom: 5px; font-size: 18px; }
        .info-grid { display: grid; grid-template-columns: 1fr 1fr; gap: 20px; margin: 15px 0; }
        .info-item { background: #f8f9fa; padding: 10px; border-radius: 5px; }
        .programme-detail { background: #f0f8ff; padding: 15px; border-radius: 5px; margin: 10px 0; }
        .jour { font-weight: bold; color: #1f3b8e; margin-bottom: 10px; }
        .module { margin-left: 20px; margin-bottom: 10px; }
        .footer { margin-top: 40px; text-align: center; font-size: 12px; color: #666; border-top: 1px solid #ddd; padding-top: 20px; }
        @media print { body { margin: 0; } .section { page-break-inside: avoid; } }
"""


def export_filename(title: str) -> str:
    """Nom de fichier sûr : tout caractère non alphanumérique ASCII devient '_'."""
    return re.sub(r"[^a-zA-Z0-9]", "_", title) + ".html"


def _text(value: Optional[object], default: str = "Non spécifié") -> str:
    return escape(str(value)) if value not in (None, "") else default


def _section(title: str, body: str) -> str:
    return f'<div class="section"><h2>{title}</h2>{body}</div>'


def _labelled(label: str, value: Optional[str]) -> str:
    return f"<p><strong>{label} :</strong> {escape(value)}</p>" if value else ""


def _schedule(programme: CustomProgramme) -> str:
    days = []
    for day in programme.schedule:
        modules = []
        for module in day.modules:
            duration = f" ({escape(module.duration)})" if module.duration else ""
            description = f"<p>{escape(module.description)}</p>" if module.description else ""
            modules.append(f'<div class="module"><strong>{escape(module.title)}</strong>{duration}{description}</div>')
        heading = " - ".join(escape(part) for part in (day.day, day.duration) if part)
        days.append(f'<div class="programme-detail"><div class="jour">{heading}</div>{"".join(modules)}</div>')
    return "".join(days)


def render_dossier(programme: CustomProgramme, generated_on: Optional[date] = None) -> str:
    generated_on = generated_on or date.today()
    access = programme.access
    sections: List[str] = []

    sections.append(_section("Informations générales", (
        '<div class="info-grid">'
        f'<div class="info-item"><strong>Statut :</strong> {escape(programme.status.value)}</div>'
        f'<div class="info-item"><strong>Durée :</strong> {_text(access.duration if access else None, "Non spécifiée")}</div>'
        f'<div class="info-item"><strong>Tarif :</strong> {_text(access.fee if access else None)} €</div>'
        f'<div class="info-item"><strong>Horaires :</strong> {_text(access.schedule_hours if access else None, "Non spécifiés")}</div>'
        "</div>"
    )))
    if programme.objectives:
        sections.append(_section(
            "Objectifs pédagogiques", f'<div class="programme-detail"><p>{escape(programme.objectives)}</p></div>'
        ))
    if programme.schedule:
        sections.append(_section("Programme détaillé", _schedule(programme)))
    if access and access.prerequisites:
        sections.append(_section("Prérequis", f"<p>{escape(access.prerequisites)}</p>"))
    if access and access.audience:
        sections.append(_section("Public concerné", f"<p>{escape(access.audience)}</p>"))
    if programme.resources:
        items = "".join(
            f"<li><strong>{escape(r.name)} :</strong> {escape(r.description or '')}</li>" for r in programme.resources
        )
        sections.append(_section("Ressources disponibles", f"<ul>{items}</ul>"))
    evaluation = programme.evaluation
    if evaluation:
        items = "".join(
            f"<li><strong>{escape(t.type)} :</strong> {escape(t.description or '')}</li>" for t in evaluation.types
        )
        sections.append(_section("Modalités d'évaluation", (
            (f"<h3>Types d'évaluation</h3><ul>{items}</ul>" if items else "")
            + _labelled("Plateforme d'évaluation", evaluation.platform)
            + _labelled("Grille d'analyse", evaluation.analysis_grid)
        )))
    if programme.certification_outcome or programme.certification_level:
        sections.append(_section("Certification", (
            _labelled("Sanction", programme.certification_outcome)
            + _labelled("Niveau", programme.certification_level)
        )))
    trainer = programme.trainer
    if trainer:
        sections.append(_section("Contact formateur", (
            f"<h3>{escape(trainer.name)}</h3>"
            + _labelled("Rôle", trainer.role)
            + _labelled("Email", trainer.email)
            + _labelled("Téléphone", trainer.phone)
            + _labelled("Biographie", trainer.biography)
        )))
    accessibility = programme.accessibility
    if accessibility:
        sections.append(_section("Accessibilité handicap", (
            _labelled("Référent handicap", accessibility.referent)
            + _labelled("Contact référent", accessibility.referent_contact)
            + _labelled("Adaptations proposées", accessibility.adaptations)
        )))
    dropout = programme.dropout
    if dropout:
        sections.append(_section("Conditions d'abandon", (
            _labelled("Conditions de renonciation", dropout.withdrawal_conditions)
            + _labelled("Facturation en cas d'abandon", dropout.dropout_billing)
        )))

    body = "\n".join(sections)
    return f"""<!DOCTYPE html>
<html lang="fr">
<head>
    <meta charset="UTF-8">
    <title>{escape(programme.title)}</title>
    <style>{_STYLE}</style>
</head>
<body>
    <div class="header">
        <h1>{escape(programme.title)}</h1>
        <div class="code">Code : {escape(programme.code)}</div>
    </div>
{body}
    <div class="footer">
        <p>Document généré le {generated_on.strftime('%d/%m/%Y')}</p>
        <p>{ORGANISATION_FOOTER}</p>
    </div>
</body>
</html>
"""
