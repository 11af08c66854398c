"""Shared résumé fixtures for the scoring and API tests."""

STRONG_RESUME = """Jane Doe
Contact
jane.doe@example.com | (555) 123-4567 | linkedin.com/in/janedoe | github.com/janedoe
Austin, TX

Professional Summary
Backend engineer with 7+ years of experience building APIs.

Work Experience
Senior Engineer, Acme Corp, 2019 - Present
• Led a team of 6 engineers to deliver a payments platform
• Reduced API latency by 40% through caching
• Migrated 12 services to Kubernetes
• Automated deployments, cutting release time by 3 hours
• Mentored 4 junior developers
• Increased test coverage from 55% to 90%

Education
Bachelor of Science in Computer Science, 2016

Skills
Python, Django, FastAPI, PostgreSQL, Redis, Docker, Kubernetes, AWS, Terraform, Git, Linux, Celery, Kafka, GraphQL, Pytest
"""

WEAK_RESUME = "just some words about me and my life story without any headings"
