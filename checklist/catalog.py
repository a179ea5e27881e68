"""
Static catalog: selectable projects and the checklist item templates.

Every new entity is seeded with the general template for each category,
followed by the override list of its project (if any).
"""

from dataclasses import dataclass
from typing import Optional

from checklist.schemas.entity import Category


@dataclass(frozen=True)
class CatalogProject:
    id: str
    name: str
    color: str


PROJECTS: tuple[CatalogProject, ...] = (
    CatalogProject(id="wts", name="WTS", color="#3b82f6"),
    CatalogProject(id="hoerzu/tvdigital", name="Hoerzu / TVDigital", color="#10b981"),
    CatalogProject(id="schoenklinik", name="Schön Klinik", color="#8b5cf6"),
    CatalogProject(id="caritas", name="Caritas", color="#f59e0b"),
    CatalogProject(id="metrohm", name="Metrohm", color="#ef4444"),
    CatalogProject(id="kontron", name="Kontron", color="#ec4899"),
)

GENERAL_TEMPLATE: dict[Category, tuple[str, ...]] = {
    Category.UIUX: (
        "Consistent styling across all pages",
        "Proper spacing and alignment",
        "Readable fonts and text sizes",
        "Sufficient color contrast for accessibility",
        "Loading states for async operations",
        "Hover states for interactive elements",
        "Visual feedback for user actions",
        "Proper use of whitespace",
        "Consistent button styles",
        "Images have alt text",
        "Icons are intuitive and consistent",
        "Error messages are clear and helpful",
    ),
    Category.FUNCTIONALITY: (
        "All forms validate input correctly",
        "All buttons perform expected actions",
        "Links navigate to correct destinations",
        "Error handling works properly",
        "Success messages display correctly",
        "Data saves and loads correctly",
        "Search functionality works as expected",
        "Filters and sorting work properly",
        "Authentication/authorization works",
        "API calls handle errors gracefully",
        "No console errors in browser",
        "All CRUD operations work correctly",
    ),
    Category.RESPONSIVE: (
        "Mobile view (320px - 480px)",
        "Tablet view (768px - 1024px)",
        "Desktop view (1280px+)",
        "Test in Chrome",
        "Test in Firefox",
        "Test in Safari",
        "Test in Edge",
        "Touch interactions work on mobile",
        "Navigation menu works on all screen sizes",
        "Images scale properly",
        "Text is readable on all devices",
        "No horizontal scrolling on mobile",
    ),
}

PROJECT_TEMPLATES: dict[str, dict[Category, tuple[str, ...]]] = {
    "wts": {
        Category.UIUX: (
            "WTS branding guidelines followed",
            "WTS color scheme applied consistently",
        ),
        Category.FUNCTIONALITY: (
            "WTS API integration working",
            "WTS data synchronization verified",
        ),
        Category.RESPONSIVE: (
            "WTS mobile app compatibility checked",
        ),
    },
    "hoerzu/tvdigital": {
        Category.UIUX: (
            "TV guide layout optimized",
            "Program listings readable",
            "Magazine-style design elements present",
        ),
        Category.FUNCTIONALITY: (
            "TV schedule data loading correctly",
            "Program search working",
            "Recording reminders functional",
        ),
        Category.RESPONSIVE: (
            "TV guide grid responsive on all devices",
        ),
    },
    "schoenklinik": {
        Category.UIUX: (
            "Medical/healthcare design standards met",
            "Accessibility for patients verified",
            "Professional healthcare appearance",
        ),
        Category.FUNCTIONALITY: (
            "Appointment booking system tested",
            "Patient portal functionality verified",
            "HIPAA/GDPR compliance checked",
        ),
        Category.RESPONSIVE: (
            "Works on tablets in clinical settings",
        ),
    },
    "caritas": {
        Category.UIUX: (
            "Charity/non-profit design approach",
            "Donation interface user-friendly",
            "Inclusive design principles applied",
        ),
        Category.FUNCTIONALITY: (
            "Donation processing working",
            "Volunteer registration tested",
            "Multi-language support verified",
        ),
        Category.RESPONSIVE: (
            "Accessible on low-end devices",
        ),
    },
    "metrohm": {
        Category.UIUX: (
            "Industrial/technical design aesthetic",
            "Technical documentation accessible",
            "Product catalog well-organized",
        ),
        Category.FUNCTIONALITY: (
            "Product configurator working",
            "Technical specs display correctly",
            "B2B ordering system functional",
        ),
        Category.RESPONSIVE: (
            "Works in industrial tablet environments",
        ),
    },
    "kontron": {
        Category.UIUX: (
            "Enterprise technology design standards",
            "Technical product presentation clear",
            "B2B interface professional",
        ),
        Category.FUNCTIONALITY: (
            "Product comparison tools working",
            "Technical documentation downloads functional",
            "Partner portal access verified",
        ),
        Category.RESPONSIVE: (
            "Optimized for business environments",
        ),
    },
}


def get_project(project_id: Optional[str]) -> Optional[CatalogProject]:
    """Look up a catalog project, None if unknown."""
    for project in PROJECTS:
        if project.id == project_id:
            return project
    return None


def combined_labels(category: Category, project_id: Optional[str]) -> list[str]:
    """General template for `category` followed by the project's overrides."""
    labels = list(GENERAL_TEMPLATE[category])
    overrides = PROJECT_TEMPLATES.get(project_id or "", {})
    labels.extend(overrides.get(category, ()))
    return labels
