"""AI Employee cost: metered pay-per-use vs the unlimited per-sub-account plan"""

from dataclasses import dataclass

from ..rates.table import AI_EMPLOYEE_SUBSCRIPTION, get_usage_service_by_id
from .basic import calculate_addon_cost, calculate_metered_cost, calculate_per_thousand_cost

CONVERSATION_AI_RATE = get_usage_service_by_id("conversation_ai").rate
VOICE_AI_RATE = get_usage_service_by_id("voice_ai_engine").rate
REVIEWS_AI_RATE = get_usage_service_by_id("reviews_ai").rate
CONTENT_WORDS_RATE_PER_1000 = get_usage_service_by_id("content_ai_text").rate
CONTENT_IMAGE_RATE = get_usage_service_by_id("content_ai_image").rate
WORKFLOW_AI_RATE = get_usage_service_by_id("workflow_ai").rate


@dataclass(frozen=True)
class AIUsage:
    """Monthly AI Employee usage."""
    conversation_messages: float = 0.0
    voice_minutes: float = 0.0
    reviews: float = 0.0
    content_words: float = 0.0
    content_images: float = 0.0
    workflow_executions: float = 0.0
    sub_accounts: int = 1
    use_unlimited: bool = False


@dataclass(frozen=True)
class AICost:
    """AI cost comparison between metered and unlimited pricing."""
    conversation: float
    voice: float
    reviews: float
    content_words: float
    content_images: float
    workflow: float
    metered_total: float
    unlimited_total: float
    cheaper: str                       # 'metered' or 'unlimited'
    cheapest_total: float
    total: float
    savings: float                     # unlimited - metered, positive when metered is cheaper


def calculate_ai_cost(usage: AIUsage) -> AICost:
    """
    Compare metered AI usage with the unlimited AI Employee plan

    The unlimited plan costs its monthly rate times the sub-account count.
    The reported total is the unlimited cost when use_unlimited is set,
    otherwise the metered cost. Savings are signed: positive means metered
    is cheaper than going unlimited.

    Args:
        usage: Monthly AI usage and sub-account count

    Returns:
        AICost with per-item costs, both totals and the cheaper option
    """
    conversation = calculate_metered_cost(usage.conversation_messages, CONVERSATION_AI_RATE)
    voice = calculate_metered_cost(usage.voice_minutes, VOICE_AI_RATE)
    reviews = calculate_metered_cost(usage.reviews, REVIEWS_AI_RATE)
    content_words = calculate_per_thousand_cost(usage.content_words, CONTENT_WORDS_RATE_PER_1000)
    content_images = calculate_metered_cost(usage.content_images, CONTENT_IMAGE_RATE)
    workflow = calculate_metered_cost(usage.workflow_executions, WORKFLOW_AI_RATE)

    metered_total = conversation + voice + reviews + content_words + content_images + workflow
    unlimited_total = calculate_addon_cost(AI_EMPLOYEE_SUBSCRIPTION, usage.sub_accounts)

    cheaper = "metered" if metered_total <= unlimited_total else "unlimited"
    total = unlimited_total if usage.use_unlimited else metered_total

    return AICost(
        conversation=conversation,
        voice=voice,
        reviews=reviews,
        content_words=content_words,
        content_images=content_images,
        workflow=workflow,
        metered_total=metered_total,
        unlimited_total=unlimited_total,
        cheaper=cheaper,
        cheapest_total=min(metered_total, unlimited_total),
        total=total,
        savings=unlimited_total - metered_total,
    )
