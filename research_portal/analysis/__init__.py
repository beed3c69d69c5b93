from research_portal.analysis.analyzer import Analyzer
from research_portal.analysis.base import BaseAnalyzer
from research_portal.analysis.factory import AnalyzerFactory
from research_portal.analysis.models import AnalysisResult, fallback_result

__all__ = ["AnalysisResult", "Analyzer", "AnalyzerFactory", "BaseAnalyzer", "fallback_result"]
