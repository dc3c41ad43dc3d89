"""Built-in form served when no schema document is configured."""

from typing import Any, Dict

ONBOARDING_FORM: Dict[str, Any] = {
    "title": "Employee Onboarding",
    "description": "Please fill out the following details to complete your onboarding process.",
    "fields": [
        {
            "id": "fullName",
            "type": "text",
            "label": "Full Name",
            "placeholder": "Enter your full name",
            "validation": {"required": True, "minLength": 2, "maxLength": 50},
        },
        {
            "id": "age",
            "type": "number",
            "label": "Age",
            "placeholder": "Enter your age",
            "validation": {"required": True, "min": 18, "max": 100},
        },
        {
            "id": "department",
            "type": "select",
            "label": "Department",
            "placeholder": "Select your department",
            "options": [
                {"label": "Engineering", "value": "engineering"},
                {"label": "Design", "value": "design"},
                {"label": "Product", "value": "product"},
                {"label": "Marketing", "value": "marketing"},
            ],
            "validation": {"required": True},
        },
        {
            "id": "skills",
            "type": "multi-select",
            "label": "Skills",
            "placeholder": "Select your skills",
            "options": [
                {"label": "React", "value": "react"},
                {"label": "Node.js", "value": "nodejs"},
                {"label": "TypeScript", "value": "typescript"},
                {"label": "Python", "value": "python"},
                {"label": "Go", "value": "go"},
                {"label": "Java", "value": "java"},
            ],
            "validation": {"required": True, "minSelected": 1},
        },
        {
            "id": "dateOfBirth",
            "type": "date",
            "label": "Date of Birth",
            "placeholder": "Select your date of birth",
            "validation": {"required": True, "minDate": "1900-01-01"},
        },
        {
            "id": "bio",
            "type": "textarea",
            "label": "Bio",
            "placeholder": "Tell us a bit about yourself",
            "validation": {"maxLength": 500},
        },
        {
            "id": "remoteWork",
            "type": "switch",
            "label": "Remote Work Preference",
            "validation": {"required": False},
        },
    ],
}
