"""
Per-domain keyword tables and suggestion texts used by the resume enhancer.

Everything here is built once at import time and is read-only afterwards.
"""

from types import MappingProxyType
from typing import Mapping, NamedTuple, Tuple

from models.resume_models import Category, Domain, Severity, Suggestion

DOMAIN_KEYWORDS: Mapping[Domain, Tuple[str, ...]] = MappingProxyType({
    Domain.SOFTWARE: (
        'programming', 'development', 'software', 'web', 'api',
        'database', 'cloud', 'agile', 'git', 'javascript',
        'python', 'java', 'react', 'node', 'devops',
        'aws', 'docker', 'kubernetes', 'microservices', 'ci/cd',
    ),
    Domain.MARKETING: (
        'marketing', 'social media', 'seo', 'content', 'analytics',
        'campaign', 'brand', 'strategy', 'digital marketing', 'email marketing',
        'ppc', 'conversion', 'market research', 'advertising', 'crm',
        'lead generation', 'marketing automation', 'google analytics',
        'social media marketing', 'content strategy',
    ),
    Domain.FINANCE: (
        'financial', 'accounting', 'budget', 'analysis', 'investment',
        'risk', 'portfolio', 'forecasting', 'banking', 'trading',
        'compliance', 'audit', 'tax', 'revenue', 'profit',
        'financial planning', 'wealth management', 'financial analysis',
        'financial reporting', 'business intelligence',
    ),
    Domain.HEALTHCARE: (
        'patient', 'clinical', 'medical', 'healthcare', 'treatment',
        'diagnosis', 'care', 'health', 'nursing', 'hospital',
        'pharmacy', 'patient care', 'medical records', 'hipaa',
        'electronic health records', 'healthcare management',
        'clinical trials', 'patient safety', 'medical procedures',
        'healthcare compliance',
    ),
})


class SkillTemplates(NamedTuple):
    strong_message: str
    weak_message: str
    weak_detail: str
    followup_message: str
    followup_detail: str


SKILL_TEMPLATES: Mapping[Domain, SkillTemplates] = MappingProxyType({
    Domain.SOFTWARE: SkillTemplates(
        strong_message='Strong technical skills alignment with job requirements',
        weak_message='Technical skills could be better aligned with job requirements',
        weak_detail='Consider adding experience with key technologies mentioned in the job description',
        followup_message='Consider expanding cloud and DevOps skills',
        followup_detail='Include experience with AWS, Docker, or Kubernetes if applicable',
    ),
    Domain.MARKETING: SkillTemplates(
        strong_message='Strong digital marketing skills present',
        weak_message='Digital marketing skills could be enhanced',
        weak_detail='Add experience with modern marketing tools and platforms',
        followup_message='Analytics and data-driven marketing skills could be expanded',
        followup_detail='Highlight experience with Google Analytics, SEO tools, and marketing automation platforms',
    ),
    Domain.FINANCE: SkillTemplates(
        strong_message='Strong financial analysis skills highlighted',
        weak_message='Financial analysis skills could be more prominent',
        weak_detail='Emphasize experience with financial modeling and analysis tools',
        followup_message='Consider adding more specific financial software expertise',
        followup_detail='Include experience with Bloomberg Terminal, Excel financial modeling, or relevant financial software',
    ),
    Domain.HEALTHCARE: SkillTemplates(
        strong_message='Strong healthcare domain knowledge demonstrated',
        weak_message='Healthcare-specific expertise could be enhanced',
        weak_detail='Highlight relevant certifications and healthcare systems experience',
        followup_message='Healthcare compliance and regulations knowledge could be expanded',
        followup_detail='Emphasize experience with HIPAA compliance and healthcare regulations',
    ),
})

# Same for every domain and score
COMMON_SUGGESTIONS: Mapping[Category, Tuple[Suggestion, ...]] = MappingProxyType({
    Category.EXPERIENCE: (
        Suggestion(
            severity=Severity.SUCCESS,
            message='Work experience is presented chronologically',
        ),
        Suggestion(
            severity=Severity.WARNING,
            message='Quantifiable achievements could be improved',
            detail='Add specific metrics, percentages, and results to your achievements',
        ),
    ),
    Category.EDUCATION: (
        Suggestion(
            severity=Severity.SUCCESS,
            message='Education section is well-formatted',
        ),
        Suggestion(
            severity=Severity.WARNING,
            message='Consider adding relevant certifications',
            detail='Include industry-specific certifications and continuing education',
        ),
    ),
    Category.FORMATTING: (
        Suggestion(
            severity=Severity.SUCCESS,
            message='Resume length is appropriate',
        ),
        Suggestion(
            severity=Severity.WARNING,
            message='Action verbs could be more impactful',
            detail='Use strong action verbs to begin bullet points (e.g., "Implemented," "Developed," "Led")',
        ),
    ),
})
