from typing import List, Dict

from ..config import RISK_TOLERANCE_PROFILES, RISK_TOLERANCE_BOUNDS
from ..exceptions import PortfolioValidationError


class RiskProfileManager:
    """Manage named risk tolerance profiles for portfolio selection"""

    @staticmethod
    def get_all_profiles() -> List[Dict]:
        """Get all predefined risk tolerance profiles"""
        return [profile.copy() for profile in RISK_TOLERANCE_PROFILES]

    @staticmethod
    def get_profile_by_name(name: str) -> Dict:
        """Get specific risk profile by name (case-insensitive)"""
        for profile in RISK_TOLERANCE_PROFILES:
            if profile["name"].lower() == name.strip().lower():
                return profile.copy()
        raise ValueError(f"Risk profile '{name}' not found")

    @staticmethod
    def create_custom_profile(name: str, risk_tolerance: float) -> Dict:
        """Create custom risk tolerance profile"""
        low, high = RISK_TOLERANCE_BOUNDS
        if not low <= risk_tolerance <= high:
            raise PortfolioValidationError(
                f"Risk tolerance must be between {low:g} and {high:g}, got {risk_tolerance}"
            )
        return {"name": name, "risk_tolerance": risk_tolerance}

    @staticmethod
    def get_risk_label(risk_tolerance: float) -> str:
        """Slider label for a tolerance value: the profile whose band contains it"""
        label = RISK_TOLERANCE_PROFILES[0]["name"]
        for profile in RISK_TOLERANCE_PROFILES:
            if risk_tolerance >= profile["lower"]:
                label = profile["name"]
        return label
