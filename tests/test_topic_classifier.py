"""Tests for topic categorisation."""
from topic_classifier import classify_topic


class TestClassifyTopic:
    def test_health_topic(self):
        info = classify_topic("Medical imaging trends")
        assert info.category == "health"
        assert info.isHealthTopic

    def test_technology_topic(self):
        assert classify_topic("Apriori algorithm").category == "technology"

    def test_business_topic(self):
        assert classify_topic("Digital Marketing Strategy").category == "business"

    def test_general_default(self):
        info = classify_topic("urban beekeeping")
        assert info.category == "general"
        assert not (info.isHealthTopic or info.isTechTopic or info.isBusinessTopic)

    def test_health_wins_over_technology(self):
        info = classify_topic("health data platforms")
        assert info.category == "health"
        assert info.isTechTopic

    def test_technology_wins_over_business(self):
        assert classify_topic("business software").category == "technology"

    def test_empty_topic_is_general(self):
        assert classify_topic("").category == "general"
