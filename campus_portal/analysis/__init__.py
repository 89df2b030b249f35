from .engine import analyze_text
from .features import FeatureVector, ResumeText, build_feature_vector
from .scorer import ScoreCard, Subscores, benchmark_for, score_features
from .sections import SectionMap, segment
from .suggestions import build_suggestions, industry_recommendations

__all__ = [
    "analyze_text",
    "SectionMap",
    "segment",
    "FeatureVector",
    "ResumeText",
    "build_feature_vector",
    "ScoreCard",
    "Subscores",
    "benchmark_for",
    "score_features",
    "build_suggestions",
    "industry_recommendations",
]
