"""Tests for AI Employee costs"""

from conftest import money
from ghl_pricing.costs.ai import AIUsage, calculate_ai_cost


def _usage(**kwargs) -> AIUsage:
    values = dict(conversation_messages=1000, voice_minutes=100, reviews=100,
                  content_words=10000, content_images=10, workflow_executions=100)
    values.update(kwargs)
    return AIUsage(**values)


class TestAICost:
    """Test metered vs unlimited AI pricing"""

    def test_metered_items(self):
        """Test per-item metered costs"""
        cost = calculate_ai_cost(_usage())
        assert cost.conversation == money(20.0)
        assert cost.voice == money(6.0)
        assert cost.reviews == money(1.0)
        assert cost.content_words == money(0.945)
        assert cost.content_images == money(0.63)
        assert cost.workflow == money(1.0)
        assert cost.metered_total == money(29.575)

    def test_metered_cheaper(self):
        """Test light usage is cheaper metered"""
        cost = calculate_ai_cost(_usage())
        assert cost.unlimited_total == money(97.0)
        assert cost.cheaper == "metered"
        assert cost.cheapest_total == money(29.575)
        assert cost.savings == money(67.425)
        assert cost.total == money(29.575)

    def test_unlimited_selected(self):
        """Test the total follows the selected plan"""
        cost = calculate_ai_cost(_usage(use_unlimited=True))
        assert cost.total == money(97.0)

    def test_unlimited_per_sub_account(self):
        """Test the unlimited plan scales with sub-accounts"""
        cost = calculate_ai_cost(_usage(sub_accounts=3))
        assert cost.unlimited_total == money(291.0)

    def test_heavy_usage_cheaper_unlimited(self):
        """Test heavy usage is cheaper on the unlimited plan"""
        cost = calculate_ai_cost(_usage(conversation_messages=10000))
        assert cost.cheaper == "unlimited"
        assert cost.savings < 0
