# profile_api/services/seed.py
"""
Fixed seed content for a fresh deployment. `reset_and_seed` wipes every
table and loads it again, so running it twice leaves the same data.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from ..models import Education, Link, Profile, Project, ProjectSkill, Skill, Work
from .aggregator import encode_links

logger = logging.getLogger(__name__)

SEED_PROFILE_ID = 1

PROFILE: Dict[str, Any] = {
    "name": "Devesh Sarda",
    "email": "deveshsarda5@gmail.com",
    "bio": (
        "B.Tech Student at NIT Delhi specializing in Computer Science. Passionate about "
        "Machine Learning, Full-Stack Development, and building intelligent systems."
    ),
}

EDUCATION: List[Dict[str, str]] = [
    {"school": "National Institute of Technology Delhi", "degree": "B.Tech",
     "field": "Computer Science and Engineering", "start_date": "2023", "end_date": "May 2027"},
    {"school": "Cambridge Court World School (CBSE)", "degree": "Class XII",
     "field": "Science Stream", "start_date": "2022", "end_date": "2023"},
]

SKILLS: List[Dict[str, Any]] = [
    {"skill": "Machine Learning", "proficiency": 9},
    {"skill": "Python", "proficiency": 9},
    {"skill": "React.js", "proficiency": 8},
    {"skill": "Node.js", "proficiency": 8},
    {"skill": "Express", "proficiency": 8},
    {"skill": "MySQL", "proficiency": 8},
    {"skill": "PyTorch", "proficiency": 8},
    {"skill": "Scikit-learn", "proficiency": 8},
    {"skill": "XGBoost", "proficiency": 8},
    {"skill": "Pandas", "proficiency": 8},
    {"skill": "REST APIs", "proficiency": 8},
    {"skill": "Tailwind CSS", "proficiency": 7},
    {"skill": "Chart.js", "proficiency": 7},
    {"skill": "EfficientNet", "proficiency": 7},
    {"skill": "OpenCV", "proficiency": 7},
    {"skill": "GridSearchCV", "proficiency": 7},
    {"skill": "Gradio", "proficiency": 6},
]

# description bullets are separated by "◦"
PROJECTS: List[Dict[str, Any]] = [
    {
        "title": "Healthcare Insurance Fraud Detection",
        "description": (
            "◦Built ML models to classify fraudulent insurance claims with 92% accuracy"
            "◦Processed 550K+ claim records via encoding, scaling, outlier removal, and cleaning"
            "◦Improved model performance by 20% using GridSearchCV across 120+ hyperparameter "
            "combinations and evaluated results using precision, recall, F1, and confusion matrix"
        ),
        "links": ["https://github.com/DeveshSarda5/MediCare_Fraud_Detection/tree/main/MediCare_Fraud_Detection"],
        "skills": ["Python", "Scikit-learn", "XGBoost", "Pandas", "GridSearchCV"],
    },
    {
        "title": "Personal Finance Dashboard",
        "description": (
            "◦Developed an intelligent finance tracker that predicts budgets with 86% accuracy"
            "◦Engineered responsive UI using React.js + Tailwind CSS and scalable REST APIs using "
            "Node.js & Express, handling 10,000+ requests/day during testing"
            "◦Designed Chart.js analytics reducing manual budgeting by 60% and optimized MySQL "
            "queries to boost load speed by 40%"
        ),
        "links": ["https://github.com/DeveshSarda5/Finance_Tracker"],
        "skills": ["React.js", "Node.js", "Express", "MySQL", "Chart.js", "Tailwind CSS"],
    },
    {
        "title": "TrashScan: Smart Waste Classifier",
        "description": (
            "◦Created a waste classification system using a frozen EfficientNet-B3 backbone and a "
            "custom classifier◦Used augmentation, weighted sampling, Adam optimizer trained over a "
            "dataset with 15,000+ images◦Evaluated using Accuracy, F1, Precision, Recall, and "
            "confusion matrix, achieving 95% accuracy across 12 categories"
        ),
        "links": ["https://github.com/ishikakanyal/TrashScan-Smart-Waste-Classifier"],
        "skills": ["Python", "PyTorch", "EfficientNet", "OpenCV", "Gradio"],
    },
]

WORK: List[Dict[str, str]] = [
    {
        "company": "NIT Delhi", "position": "Training and Placement Cell",
        "start_date": "", "end_date": "",
        "description": (
            "Coordinated with industry professionals with a diverse team of 120 people"
            "◦Managed outreach initiatives improving employer engagement and recruitment "
            "participation by 25%"
        ),
    },
    {
        "company": "NIT Delhi", "position": "Google Developer Student Club",
        "start_date": "", "end_date": "",
        "description": (
            "Organized and executed 15+ technical events, hands-on workshops and community "
            "initiatives◦Supported peer learning and improved campus-wide technical engagement"
            "◦Contributed to growth of innovation-driven developer culture within the institution"
        ),
    },
]

LINKS: Dict[str, str] = {
    "github": "https://github.com/DeveshSarda5",
    "linkedin": "https://www.linkedin.com/in/devesh-sarda-891412370/",
    "portfolio": "",
    "resume": "https://drive.google.com/file/d/17YmgWIt7bI8yuCZuiJ7z1rhQIVXO5DpP/view?usp=sharing",
}


def wipe(db: Session) -> None:
    # children before parents so foreign keys hold at every step
    for model in (ProjectSkill, Project, Education, Skill, Work, Link, Profile):
        db.query(model).delete()


def reset_and_seed(db: Session) -> int:
    """Delete all rows and load the seed profile. Returns the profile id."""
    try:
        wipe(db)
        db.add(Profile(id=SEED_PROFILE_ID, **PROFILE))
        db.flush()

        db.add_all(Education(profile_id=SEED_PROFILE_ID, **e) for e in EDUCATION)
        db.add_all(Skill(profile_id=SEED_PROFILE_ID, **s) for s in SKILLS)
        for p in PROJECTS:
            row = Project(
                profile_id=SEED_PROFILE_ID,
                title=p["title"],
                description=p["description"],
                links=encode_links(p["links"]),
            )
            row.tags = [ProjectSkill(skill=s) for s in p["skills"]]
            db.add(row)
            db.flush()
        db.add_all(Work(profile_id=SEED_PROFILE_ID, **w) for w in WORK)
        db.add(Link(profile_id=SEED_PROFILE_ID, **LINKS))
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(
        "Seeded profile_id=%s: %d education, %d skills, %d projects, %d work",
        SEED_PROFILE_ID, len(EDUCATION), len(SKILLS), len(PROJECTS), len(WORK),
    )
    return SEED_PROFILE_ID
