from models import TopicInfo

HEALTH_KEYWORDS = ("health", "medical")
TECH_KEYWORDS = ("technology", "software", "programming", "ai", "data", "mining", "algorithm", "apriori")
BUSINESS_KEYWORDS = ("business", "marketing")


def classify_topic(topic: str) -> TopicInfo:
    """Tags a topic with a coarse category by keyword containment (health > technology > business)."""
    topic_lower = (topic or "").lower()

    is_health = any(keyword in topic_lower for keyword in HEALTH_KEYWORDS)
    is_tech = any(keyword in topic_lower for keyword in TECH_KEYWORDS)
    is_business = any(keyword in topic_lower for keyword in BUSINESS_KEYWORDS)

    category = "general"
    if is_health:
        category = "health"
    elif is_tech:
        category = "technology"
    elif is_business:
        category = "business"

    return TopicInfo(
        category=category,
        isHealthTopic=is_health,
        isTechTopic=is_tech,
        isBusinessTopic=is_business,
    )
