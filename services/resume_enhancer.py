import asyncio
import logging
import math
from typing import List, Optional, Tuple

from config import settings
from models.resume_models import (
    AnalysisResult,
    CategorySuggestions,
    Domain,
    MatchingStrategy,
    Severity,
    Suggestion,
)
from services.domain_keywords import COMMON_SUGGESTIONS, DOMAIN_KEYWORDS, SKILL_TEMPLATES

logger = logging.getLogger(__name__)

# Skills are reported as strong above this score
STRONG_MATCH_THRESHOLD = 70


class ResumeEnhancer:
    def __init__(self, strategy: MatchingStrategy = MatchingStrategy.TOKEN):
        self.strategy = strategy

    def analyze(self, resume_text: str, job_description: str, domain: Domain) -> AnalysisResult:
        """
        Score a resume against the keyword list of a domain and build suggestions
        """
        matched = self.match_keywords(resume_text, job_description, domain)
        match_score = self.calculate_match_score(len(matched), len(DOMAIN_KEYWORDS[domain]))

        suggestions = CategorySuggestions(
            skills=self.skill_suggestions(domain, match_score),
            **{category.value: common for category, common in COMMON_SUGGESTIONS.items()},
        )

        logger.info(
            f"Analysis for domain '{domain.value}': {len(matched)} keywords matched, score {match_score}"
        )
        return AnalysisResult(
            match_score=match_score,
            suggestions=suggestions,
            matched_keywords=tuple(matched),
        )

    def match_keywords(self, resume_text: str, job_description: str, domain: Domain) -> List[str]:
        """Return the domain keywords found in either text, in table order"""
        resume_lower = resume_text.lower()
        job_lower = job_description.lower()

        if self.strategy == MatchingStrategy.SUBSTRING:
            return [
                keyword for keyword in DOMAIN_KEYWORDS[domain]
                if keyword in resume_lower or keyword in job_lower
            ]

        # Multi-word phrases can never equal a single token
        tokens = set(resume_lower.split()) | set(job_lower.split())
        return [keyword for keyword in DOMAIN_KEYWORDS[domain] if keyword in tokens]

    @staticmethod
    def calculate_match_score(matched_count: int, total_count: int) -> int:
        if total_count <= 0:
            return 0
        # Round half up; round() would bank 12.5 down to 12
        score = math.floor(matched_count / total_count * 100 + 0.5)
        return max(0, min(score, 100))

    @staticmethod
    def skill_suggestions(domain: Domain, match_score: int) -> Tuple[Suggestion, ...]:
        templates = SKILL_TEMPLATES[domain]

        if match_score > STRONG_MATCH_THRESHOLD:
            headline = Suggestion(severity=Severity.SUCCESS, message=templates.strong_message)
        else:
            headline = Suggestion(
                severity=Severity.WARNING,
                message=templates.weak_message,
                detail=templates.weak_detail,
            )

        return (
            headline,
            Suggestion(
                severity=Severity.WARNING,
                message=templates.followup_message,
                detail=templates.followup_detail,
            ),
        )

    async def analyze_async(self, resume_text: str, job_description: str, domain: Domain,
                            delay_seconds: Optional[float] = None) -> AnalysisResult:
        """
        Analyze after the configured processing delay
        """
        if delay_seconds is None:
            delay_seconds = settings.analysis_delay_seconds
        if delay_seconds > 0:
            await asyncio.sleep(delay_seconds)
        return self.analyze(resume_text, job_description, domain)


def analyze(resume_text: str, job_description: str, domain: Domain,
            strategy: MatchingStrategy = MatchingStrategy.TOKEN) -> AnalysisResult:
    return ResumeEnhancer(strategy).analyze(resume_text, job_description, domain)
