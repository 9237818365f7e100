"""
Jeu de données fictif utilisé en mode mock (USE_MOCK_DATA=true) et dans les tests.

Ces listes ne doivent jamais être modifiées en place : MockDataSource en prend
une copie profonde par instance.
"""

from datetime import date, datetime

USERS = [
    {
        "id": "1",
        "email": "marie.dubois@gestionmax.fr",
        "first_name": "Marie",
        "last_name": "Dubois",
        "role": "ADMIN",
        "status": "active",
        "avatar": "/images/avatars/admin.jpg",
        "created_at": datetime(2024, 1, 1, 10, 0),
        "updated_at": datetime(2025, 1, 1, 10, 0),
    },
    {
        "id": "2",
        "email": "pierre.martin@gestionmax.fr",
        "first_name": "Pierre",
        "last_name": "Martin",
        "role": "FORMATEUR",
        "status": "active",
        "created_at": datetime(2024, 2, 1, 10, 0),
        "updated_at": datetime(2025, 1, 1, 10, 0),
    },
    {
        "id": "3",
        "email": "sophie.dupont@example.com",
        "first_name": "Sophie",
        "last_name": "Dupont",
        "role": "BENEFICIAIRE",
        "status": "pending",
        "created_at": datetime(2024, 11, 1, 10, 0),
        "updated_at": datetime(2025, 1, 1, 10, 0),
    },
]

PROGRAMMES = [
    {
        "id": "1",
        "code": "A001-WP-DD",
        "title": "Création de son site internet (WordPress) + Stratégie de développement digital",
        "description": (
            "Formation complète en 2 jours pour artisans, commerçants et professions libérales : "
            "création d'un site WordPress puis bases d'une stratégie de développement digital."
        ),
        "duration_hours": 14,
        "level": "DEBUTANT",
        "modality": "PRESENTIEL",
        "price": 980,
        "status": "PUBLIE",
        "competencies": ["WordPress", "SEO", "Réseaux sociaux", "Publicité en ligne", "Google Analytics"],
        "trainer_ids": ["2"],
        "created_at": datetime(2025, 1, 30, 10, 0),
        "updated_at": datetime(2025, 1, 30, 10, 0),
    },
    {
        "id": "2",
        "code": "A008-BD-WC",
        "title": "Marketing digital avec Brevo + Techniques de vente en ligne avec WooCommerce",
        "description": (
            "Formation complète en 2 jours : emailing et automatisation avec Brevo, "
            "puis vente en ligne avec WooCommerce."
        ),
        "duration_hours": 14,
        "level": "DEBUTANT",
        "modality": "PRESENTIEL",
        "price": 980,
        "status": "PUBLIE",
        "competencies": ["Brevo", "Emailing", "Automatisation", "WooCommerce", "E-commerce"],
        "trainer_ids": ["2"],
        "created_at": datetime(2025, 2, 1, 10, 0),
        "updated_at": datetime(2025, 2, 1, 10, 0),
    },
    {
        "id": "3",
        "code": "A009-SW-MA",
        "title": "Gestion de la sécurité de votre site & analyse Web",
        "description": "Sécurisation et maintenance d'un site WordPress, statistiques avec Matomo (conforme RGPD).",
        "duration_hours": 14,
        "level": "INTERMEDIAIRE",
        "modality": "HYBRIDE",
        "price": 980,
        "status": "PUBLIE",
        "competencies": ["Sécurité WordPress", "Maintenance", "Matomo", "RGPD"],
        "trainer_ids": ["2"],
        "created_at": datetime(2025, 2, 5, 10, 0),
        "updated_at": datetime(2025, 2, 5, 10, 0),
    },
    {
        "id": "4",
        "code": "A015-IA-CGPT",
        "title": "Génération de contenu avec ChatGPT + Automatisation Marketing",
        "description": "Maîtrise de ChatGPT pour la génération de contenu et automatisations avec Make et Brevo.",
        "duration_hours": 14,
        "level": "AVANCE",
        "modality": "DISTANCIEL",
        "price": 1960,
        "status": "BROUILLON",
        "competencies": ["ChatGPT", "IA générative", "Make", "No-code"],
        "trainer_ids": [],
        "created_at": datetime(2025, 2, 28, 10, 0),
        "updated_at": datetime(2025, 2, 28, 10, 0),
    },
]

LEARNERS = [
    {
        "id": "1",
        "last_name": "Dupont",
        "first_name": "Sophie",
        "email": "sophie.dupont@example.com",
        "phone": "0612345678",
        "birth_date": date(1995, 3, 15),
        "address": "12 Rue de la Paix, 75001 Paris",
        "status": "ACTIF",
        "programme_ids": ["1"],
        "progression": 65,
        "created_at": datetime(2024, 12, 1, 10, 0),
        "updated_at": datetime(2025, 1, 15, 14, 30),
    },
    {
        "id": "2",
        "last_name": "Bernard",
        "first_name": "Lucas",
        "email": "lucas.bernard@example.com",
        "phone": "0698765432",
        "birth_date": date(1992, 7, 22),
        "address": "8 Avenue Victor Hugo, 06000 Nice",
        "status": "ACTIF",
        "programme_ids": ["1", "2"],
        "progression": 42,
        "created_at": datetime(2024, 11, 15, 14, 30),
        "updated_at": datetime(2025, 1, 10, 9, 0),
    },
]

APPOINTMENTS = [
    {
        "id": "1",
        "programme_id": "1",
        "programme_title": "Création de son site internet (WordPress) + Stratégie de développement digital",
        "client": {
            "last_name": "Dupont",
            "first_name": "Marie",
            "email": "marie.dupont@email.com",
            "phone": "06.12.34.56.78",
            "company": "Boulangerie Dupont",
        },
        "type": "positionnement",
        "status": "confirme",
        "date": date(2025, 2, 15),
        "time": "10:00",
        "duration_minutes": 60,
        "location": "presentiel",
        "address": "123 Rue de la Paix, 06000 Nice",
        "notes": "Premier contact pour évaluer le niveau et les besoins",
        "reminder_sent": True,
        "created_by": "2",
        "created_at": datetime(2025, 1, 30, 10, 0),
        "updated_at": datetime(2025, 1, 30, 10, 0),
    },
    {
        "id": "2",
        "programme_id": "2",
        "programme_title": "Marketing digital avec Brevo + Techniques de vente en ligne avec WooCommerce",
        "client": {
            "last_name": "Martin",
            "first_name": "Pierre",
            "email": "pierre.martin@email.com",
            "phone": "06.87.65.43.21",
            "company": "Électricité Martin",
        },
        "type": "information",
        "status": "enAttente",
        "date": date(2025, 2, 20),
        "time": "14:30",
        "duration_minutes": 45,
        "location": "visio",
        "video_link": "https://meet.google.com/abc-defg-hij",
        "notes": "Demande d'informations sur les formations marketing digital",
        "reminder_sent": False,
        "created_by": "2",
        "created_at": datetime(2025, 1, 31, 14, 0),
        "updated_at": datetime(2025, 1, 31, 14, 0),
    },
    {
        "id": "3",
        "programme_id": "3",
        "programme_title": "Gestion de la sécurité de votre site & analyse Web",
        "client": {
            "last_name": "Bernard",
            "first_name": "Sophie",
            "email": "sophie.bernard@email.com",
            "phone": "06.98.76.54.32",
            "company": "Cabinet d'avocats Bernard",
        },
        "type": "inscription",
        "status": "termine",
        "date": date(2025, 1, 25),
        "time": "09:00",
        "duration_minutes": 90,
        "location": "presentiel",
        "address": "456 Avenue des Champs, 06000 Nice",
        "notes": "Inscription confirmée, formation réalisée avec succès",
        "reminder_sent": True,
        "created_by": "2",
        "created_at": datetime(2025, 1, 20, 9, 0),
        "updated_at": datetime(2025, 1, 25, 18, 0),
    },
]

ARTICLES = [
    {
        "id": "1",
        "title": "Pourquoi créer son site avec WordPress en 2025",
        "slug": "pourquoi-creer-son-site-avec-wordpress-en-2025",
        "content": "<p>WordPress reste la solution la plus simple pour lancer un site professionnel.</p>",
        "summary": "Les atouts de WordPress pour les artisans et commerçants.",
        "author": "Pierre Martin",
        "status": "publie",
        "categories": ["wordpress", "site-web"],
        "tags": ["debutant", "cms"],
        "meta_keywords": ["wordpress", "site internet"],
        "views": 120,
        "reading_time": 1,
        "featured": True,
        "published_at": date(2025, 1, 10),
        "created_at": datetime(2025, 1, 9, 10, 0),
        "updated_at": datetime(2025, 1, 10, 8, 0),
    },
    {
        "id": "2",
        "title": "Automatiser son marketing avec Brevo",
        "slug": "automatiser-son-marketing-avec-brevo",
        "content": "<p>Scénarios d'emailing, segmentation et relances automatiques.</p>",
        "summary": "Premiers pas avec l'automatisation marketing.",
        "author": "Pierre Martin",
        "status": "brouillon",
        "categories": ["marketing"],
        "tags": ["cms", "automatisation"],
        "meta_keywords": [],
        "views": 0,
        "reading_time": 1,
        "featured": False,
        "created_at": datetime(2025, 2, 2, 10, 0),
        "updated_at": datetime(2025, 2, 2, 10, 0),
    },
]

CUSTOM_PROGRAMMES = [
    {
        "id": "1",
        "title": "WordPress sur mesure pour la Boulangerie Dupont",
        "code": "FP-2025-001",
        "description": "Parcours adapté à la mise en ligne d'une boutique de quartier.",
        "duration_hours": 14,
        "level": "Débutant",
        "price": 980,
        "objectives": "Créer et administrer le site vitrine de l'entreprise en autonomie.",
        "schedule": [
            {
                "day": "Jour 1",
                "duration": "7h",
                "modules": [
                    {"title": "Installation de WordPress", "duration": "3h30"},
                    {"title": "Pages et menus", "duration": "3h30"},
                ],
            },
        ],
        "access": {
            "prerequisites": "Maîtriser les fonctions de base d'un ordinateur",
            "audience": "Artisans et commerçants",
            "duration": "14 heures",
            "schedule_hours": "9h-13h / 14h-17h",
            "lead_time": "15 jours",
            "fee": 980,
        },
        "trainer": {"name": "Pierre Martin", "email": "pierre.martin@gestionmax.fr", "role": "Formateur"},
        "resources": [{"name": "Support de cours", "description": "Espace Notion partagé"}],
        "evaluation": {"types": [{"type": "Quiz", "description": "Quiz EVALBOX en fin de journée"}]},
        "certification_outcome": "Certificat de réalisation de formation",
        "status": "EN_COURS",
        "created_at": datetime(2025, 3, 1, 10, 0),
        "updated_at": datetime(2025, 3, 1, 10, 0),
    },
]

CONTACTS = [
    {
        "id": "1",
        "name": "Sophie Lambert",
        "email": "sophie.lambert@exemple.fr",
        "phone": "0611223344",
        "type": "formation",
        "subject": "Formation WordPress en intra",
        "message": "Bonjour, nous souhaiterions former deux salariés à WordPress.",
        "status": "nouveau",
        "priority": "normale",
        "created_at": datetime(2025, 1, 20, 9, 30),
        "updated_at": datetime(2025, 1, 20, 9, 30),
    },
    {
        "id": "2",
        "name": "Marc Petit",
        "email": "marc.petit@exemple.fr",
        "phone": "",
        "type": "reclamation",
        "subject": "Accès au support de cours",
        "message": "Le lien vers le support ne fonctionne plus depuis la fin de la session.",
        "status": "enCours",
        "priority": "haute",
        "created_at": datetime(2025, 1, 22, 14, 0),
        "updated_at": datetime(2025, 1, 23, 10, 0),
    },
    {
        "id": "3",
        "name": "Atelier Moreau",
        "email": "contact@atelier-moreau.fr",
        "phone": "0478000000",
        "type": "devis",
        "subject": "Devis SEO",
        "message": "Pouvez-vous nous envoyer un devis pour une formation référencement ?",
        "status": "traite",
        "priority": "normale",
        "response": "Devis envoyé par email le 25 janvier.",
        "responded_at": datetime(2025, 1, 25, 11, 0),
        "created_at": datetime(2025, 1, 24, 16, 45),
        "updated_at": datetime(2025, 1, 25, 11, 0),
    },
]
