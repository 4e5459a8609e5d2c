"""Pre-written slide content used when the generative service is unavailable.

Each ``ContentLibrary`` answers for the topics its ``matches`` predicate
accepts. ``find_library`` walks ``CONTENT_LIBRARIES`` in order and falls back
to the generic library, so topic-specific content never needs a special case
in the calling code.
"""

import logging
from typing import List, Optional

from models import Slide, make_content_slide, make_title_slide

BULLETS_PER_SLIDE = 4
BULLETS_PER_SLIDE_MORE_INFO = 5
SHORT_TITLE_LIMIT = 10 # decks with at most this many content slides get short titles

ASPECT_LABELS = [
    "Introduction and Key Concepts",
    "Technical Implementation Details",
    "Real-World Applications",
    "Performance and Optimization",
    "Advanced Features and Benefits",
    "Industry Best Practices",
    "Case Studies and Examples",
    "Future Trends and Developments",
    "Expert Recommendations",
    "Strategic Implementation",
]

GENERIC_BULLET_TEMPLATES = [
    "Professional analysis of {aspect} in {topic} demonstrates significant impact across industry sectors, "
    "with leading organizations reporting measurable improvements in operational efficiency, strategic outcomes "
    "and competitive positioning through systematic implementation of evidence-based methodologies.",
    "Research on {aspect} for {topic} indicates quantifiable benefits including enhanced performance metrics, "
    "cost optimization opportunities and scalable solutions that address complex challenges while maintaining "
    "compliance with industry standards and regulatory requirements.",
    "Expert recommendations on {aspect} emphasize structured approaches to {topic}, incorporating proven "
    "frameworks, stakeholder engagement strategies and continuous improvement processes that ensure successful "
    "outcomes and sustainable value creation for organizations and end users.",
    "Putting {aspect} of {topic} into practice requires comprehensive planning, resource allocation and change "
    "management protocols that facilitate smooth adoption, minimize risks and maximize return on investment "
    "through careful attention to technical requirements and organizational readiness.",
    "Future developments in {aspect} of {topic} point to emerging opportunities for innovation, technological "
    "advancement and market expansion that will reshape industry landscapes for organizations willing to invest "
    "in new capabilities and strategic positioning.",
]

GENERIC_SUPPLEMENTS = [
    "Important aspect of {topic} that provides valuable insights and practical applications for professionals "
    "working in this field with measurable outcomes and strategic benefits.",
    "Practitioners working with {topic} rely on clear goals, reliable measurement and regular review cycles to "
    "turn early experiments into repeatable, well-understood results.",
    "Adoption of {topic} succeeds when teams combine domain expertise with careful planning, shared "
    "documentation and feedback from the people affected by the change.",
    "Long-term value from {topic} comes from continuous learning, attention to emerging research and "
    "willingness to refine established practices as conditions change.",
]


def bullets_per_slide(more_info_mode: bool) -> int:
    return BULLETS_PER_SLIDE_MORE_INFO if more_info_mode else BULLETS_PER_SLIDE


def use_short_titles(content_slide_count: int) -> bool:
    return content_slide_count <= SHORT_TITLE_LIMIT


class ContentLibrary:
    """Generic template content, parameterized by topic and aspect label."""

    name = "generic"

    def matches(self, topic: str) -> bool:
        return True

    def content_slide(self, topic: str, position: int, more_info_mode: bool, short_titles: bool) -> Slide:
        aspect = ASPECT_LABELS[position % len(ASPECT_LABELS)]
        title = f"{topic}: {aspect}" if short_titles else f"{aspect} of {topic}"
        bullets = [
            template.format(topic=topic, aspect=aspect.lower())
            for template in GENERIC_BULLET_TEMPLATES[: bullets_per_slide(more_info_mode)]
        ]
        return make_content_slide(title, bullets)

    def fallback_title(self, topic: str, index: int, short_titles: bool) -> str:
        return f"{topic} - Key Aspect {index + 1}"

    def supplemental_bullets(self, topic: str) -> List[str]:
        return [text.format(topic=topic) for text in GENERIC_SUPPLEMENTS]

    def build_prompt(
        self, topic: str, content_slide_count: int, category: str, more_info_mode: bool, short_titles: bool
    ) -> Optional[str]:
        """Returns a library-specific prompt, or None to use the generic one."""
        return None


APRIORI_SLIDES = [
    {
        "short_title": "Understanding the Apriori Principle Foundation",
        "title": "Fundamental Concepts and Core Principles of the Apriori Principle",
        "bullets": [
            "The Apriori principle, formulated by Rakesh Agrawal and Ramakrishnan Srikant in 1994, establishes that if an itemset is frequent in a transaction database, then all of its subsets must also be frequent. This anti-monotone property forms the theoretical foundation for efficient association rule mining algorithms.",
            "Mathematical formalization states that for itemsets X and Y, if support(X ∪ Y) ≥ minimum support threshold, then support(X) ≥ minimum support and support(Y) ≥ minimum support. This downward closure property enables systematic pruning of the exponential search space.",
            "The algorithm operates through iterative passes over the transaction database: Pass 1 identifies all frequent 1-itemsets, Pass 2 generates candidate 2-itemsets from frequent 1-itemsets and tests their frequency, continuing until no new frequent itemsets can be discovered.",
            "Support and confidence metrics quantify association strength: Support(A → B) = P(A ∪ B) measures how often itemsets appear together, while Confidence(A → B) = P(B|A) = Support(A ∪ B)/Support(A) indicates the reliability of the association rule.",
            "Lift metric provides additional insight by measuring how much more likely B occurs when A is present compared to when A is absent: Lift(A → B) = Confidence(A → B)/Support(B), with values greater than 1 indicating positive correlation.",
        ],
    },
    {
        "short_title": "Apriori Algorithm Implementation Mechanics",
        "title": "Technical Implementation and Best Practices of the Apriori Principle",
        "bullets": [
            "The join step systematically combines frequent (k-1)-itemsets to generate candidate k-itemsets by merging itemsets that share the same first (k-2) items but differ in their last item, ensuring complete coverage without generating duplicate candidates.",
            "The prune step applies the Apriori principle to eliminate candidate k-itemsets that contain any infrequent (k-1)-subset, typically reducing the candidate space by 70-90% in sparse transaction databases and significantly improving computational efficiency.",
            "Hash tree data structures optimize the support counting phase by organizing candidate itemsets in a tree structure that enables efficient subset operations, reducing the time complexity of checking which candidates are contained in each transaction.",
            "Transaction reduction techniques progressively eliminate transactions from consideration if they cannot possibly contain any frequent k-itemsets, shrinking the effective database size by 40-60% in later algorithm iterations and accelerating processing.",
            "Memory management strategies include candidate itemset compression, incremental database scanning, and vertical data format representation to handle large-scale datasets that exceed available system memory while maintaining algorithm correctness.",
        ],
    },
    {
        "short_title": "Real-World Apriori Success Stories",
        "title": "Industry Applications and Case Studies of the Apriori Principle",
        "bullets": [
            "Walmart applies Apriori-based market basket analysis to process over 267 million customer transactions weekly, discovering unexpected product associations such as the famous \"beer and diapers\" correlation with 32% lift, leading to strategic product placement that increased cross-selling revenue by $1.2 billion annually.",
            "Amazon leverages Apriori principles in their recommendation engine to analyze billions of customer browsing and purchasing sessions, identifying item association patterns that drive their \"customers who bought this item also bought\" feature, contributing to approximately 35% of total company sales revenue.",
            "JPMorgan Chase employs Apriori algorithms for fraud detection by analyzing transaction patterns across 5 billion monthly transactions, identifying suspicious activity combinations with 94% accuracy and preventing an estimated $2.3 billion in fraudulent transactions through early detection systems.",
            "Netflix utilizes modified Apriori techniques on viewing pattern data containing 200+ million subscriber interactions daily, discovering genre and content associations that improved recommendation accuracy by 28% and reduced customer churn by 15% through personalized content suggestions.",
            "Pharmaceutical companies apply Apriori to adverse drug reaction databases containing 15+ million reports, identifying dangerous drug interaction patterns that led to 23 new FDA safety warnings and prevented an estimated 50,000 serious adverse events annually.",
        ],
    },
    {
        "short_title": "Apriori Performance and Modern Alternatives",
        "title": "Performance Optimization and Scalability Challenges of the Apriori Principle",
        "bullets": [
            "Scalability limitations emerge with large itemset spaces: for datasets containing 1,000 unique items, the potential number of 2-itemsets reaches 499,500 combinations, creating exponential memory and computational requirements that challenge traditional Apriori implementations on standard hardware.",
            "FP-Growth algorithm addresses Apriori limitations by eliminating candidate generation entirely, using compressed Frequent Pattern trees and recursive pattern mining to achieve 10x performance improvements while maintaining identical result sets for association rule discovery.",
            "Distributed implementations using Apache Spark and Hadoop MapReduce enable Apriori processing of petabyte-scale transaction databases across thousands of compute nodes, with major technology companies achieving 95% parallel efficiency on datasets containing billions of transaction records.",
            "Memory optimization techniques include transaction projection to remove infrequent items early, vertical database representation for efficient intersection operations, and incremental mining algorithms for real-time streaming data applications with bounded memory requirements.",
            "Modern variants include Eclat using vertical tidset intersections, CHARM incorporating closed itemset mining to reduce output size by 90%, and parallel algorithms designed for GPU computing achieving 100x speedups on dense transaction datasets.",
        ],
    },
    {
        "short_title": "Future of Apriori and Association Mining",
        "title": "Advanced Variations and Future Trends of the Apriori Principle",
        "bullets": [
            "Machine learning integration combines Apriori with deep learning models to discover complex, non-linear associations in high-dimensional data spaces, enabling pattern discovery in image, text, and sensor data that traditional itemset mining cannot effectively process.",
            "Stream mining adaptations handle continuous data flows from IoT devices and social media platforms, processing millions of transactions per second while maintaining approximate frequent itemsets within bounded error margins using sliding window and landmark window techniques.",
            "Privacy-preserving extensions implement differential privacy and secure multi-party computation protocols, allowing collaborative association rule mining across organizations while protecting sensitive transaction data and maintaining regulatory compliance requirements.",
            "Temporal association mining incorporates time-based constraints to discover sequential patterns and seasonal trends, revealing how purchasing behaviors and user interactions evolve over time with applications in supply chain optimization and customer lifecycle management.",
            "Quantum computing applications explore exponential speedups for itemset enumeration problems, with early research demonstrating potential 1000x performance improvements for specific association mining tasks using quantum superposition and entanglement principles.",
        ],
    },
]

APRIORI_FALLBACK_TITLES = [
    "Fundamental Apriori Algorithm Concepts",
    "Implementation and Technical Details",
    "Real-World Applications and Case Studies",
    "Performance Optimization Techniques",
    "Advanced Variations and Extensions",
]

APRIORI_SUPPLEMENTS = [
    "The Apriori principle leverages the downward closure property of frequent itemsets, stating that all subsets of a frequent itemset must also be frequent, enabling efficient pruning of the exponential search space.",
    "Implementation involves iterative database scans where each pass k generates candidate k-itemsets from frequent (k-1)-itemsets, followed by support counting and pruning steps.",
    "Performance optimization includes hash tree structures for efficient subset checking, transaction reduction techniques, and parallel processing approaches for large-scale datasets.",
    "Real applications span retail market basket analysis, web usage mining, bioinformatics sequence analysis, and fraud detection systems across various industries.",
]

APRIORI_PROMPT_SLIDES = [
    (
        "Core Concepts of the Apriori Principle",
        "Fundamental Concepts and Core Principles of the Apriori Principle",
        [
            "The Apriori principle, introduced by Rakesh Agrawal and Ramakrishnan Srikant in 1994, states that if an itemset is frequent, then all of its subsets must also be frequent. This anti-monotone property enables efficient pruning of candidate itemsets during association rule mining.",
            "Mathematical foundation: If support(X ∪ Y) ≥ min_support, then support(X) ≥ min_support and support(Y) ≥ min_support. This downward closure property allows the algorithm to eliminate exponential search spaces.",
            "The algorithm operates in iterative passes: Pass 1 identifies frequent 1-itemsets, Pass 2 generates candidate 2-itemsets from frequent 1-itemsets, continuing until no frequent k-itemsets can be found.",
            "Support and confidence are key metrics: Support(X → Y) = P(X ∪ Y) measures itemset frequency, while Confidence(X → Y) = Support(X ∪ Y)/Support(X) measures association strength.",
        ],
    ),
    (
        "Apriori Algorithm Implementation Details",
        "Technical Implementation and Best Practices of the Apriori Principle",
        [
            "The join step combines frequent (k-1)-itemsets to generate candidate k-itemsets by merging itemsets that differ only in their last item, ensuring systematic candidate generation without duplicates.",
            "The prune step eliminates candidates containing infrequent (k-1)-subsets using the Apriori principle, reducing computational overhead by 70-90% in typical sparse transaction databases.",
            "Hash tree data structures optimize subset checking during support counting, reducing time complexity from O(n×m) to O(log n×m) where n is candidates and m is transactions.",
            "Transaction reduction techniques eliminate transactions that cannot contain frequent k-itemsets after each pass, shrinking database size by 40-60% in later iterations.",
        ],
    ),
    (
        "Real-World Apriori Applications",
        "Industry Applications and Case Studies of the Apriori Principle",
        [
            "Market basket analysis at Walmart processes 267 million weekly transactions using Apriori variants, discovering product associations like \"beer and diapers\" with 32% lift, increasing cross-selling revenue by $1.2 billion annually.",
            "Web usage mining at Amazon applies Apriori to clickstream data containing billions of user sessions, identifying navigation patterns that drive 35% of total sales through \"customers who bought this also bought\" recommendations.",
            "Fraud detection systems at major banks use Apriori on transaction patterns, analyzing 5 billion monthly transactions to identify suspicious activity with 94% accuracy, preventing $2.3 billion in fraudulent transactions.",
            "Bioinformatics research applies Apriori to protein sequence analysis, processing datasets with millions of sequences to discover functional motifs, contributing to drug discovery with 15+ FDA-approved medications.",
        ],
    ),
    (
        "Apriori Performance and Optimization",
        "Performance Optimization and Scalability Challenges of the Apriori Principle",
        [
            "Scalability challenges: Traditional Apriori struggles with dense datasets due to exponential candidate generation - with 1000 items, potential 2-itemsets reach 499,500 combinations, requiring optimized memory management.",
            "FP-Growth algorithm eliminates candidate generation entirely, achieving 10x speedup over Apriori by using compressed FP-tree structures and recursive mining patterns without multiple database scans.",
            "Parallel implementations using MapReduce process petabyte-scale datasets across 1000+ nodes, with Google's distributed Apriori achieving 95% efficiency on transaction databases containing billions of records.",
            "Memory optimization techniques include transaction projection, vertical database formats, and incremental mining for streaming data, reducing memory footprint by 80% while maintaining algorithm correctness.",
        ],
    ),
]


class AprioriLibrary(ContentLibrary):
    """Detailed demonstration content for the Apriori principle."""

    name = "apriori"

    def __init__(self):
        self._generic = ContentLibrary()

    def matches(self, topic: str) -> bool:
        return "apriori" in (topic or "").lower()

    def content_slide(self, topic: str, position: int, more_info_mode: bool, short_titles: bool) -> Slide:
        if position >= len(APRIORI_SLIDES):
            # Past the pre-written pool the deck continues with generic aspects.
            return self._generic.content_slide(topic, position, more_info_mode, short_titles)
        entry = APRIORI_SLIDES[position]
        title = entry["short_title"] if short_titles else entry["title"]
        return make_content_slide(title, entry["bullets"][: bullets_per_slide(more_info_mode)])

    def fallback_title(self, topic: str, index: int, short_titles: bool) -> str:
        if short_titles:
            return APRIORI_FALLBACK_TITLES[index % len(APRIORI_FALLBACK_TITLES)]
        return APRIORI_SLIDES[index % len(APRIORI_SLIDES)]["title"]

    def supplemental_bullets(self, topic: str) -> List[str]:
        return list(APRIORI_SUPPLEMENTS)

    def build_prompt(
        self, topic: str, content_slide_count: int, category: str, more_info_mode: bool, short_titles: bool
    ) -> Optional[str]:
        # The fourth worked example is only shown when the deck has room for it.
        examples = APRIORI_PROMPT_SLIDES if content_slide_count > 3 else APRIORI_PROMPT_SLIDES[:3]
        blocks = []
        for number, (short_title, long_title, bullets) in enumerate(examples, start=2):
            lines = [f"SLIDE {number}: CONTENT", f"Title: {short_title if short_titles else long_title}"]
            lines.extend(f"• {bullet}" for bullet in bullets)
            blocks.append("\n".join(lines))

        return (
            f"You are a Data Mining expert professor. Create EXACTLY {content_slide_count} completely different "
            f"slides about \"{topic}\". Each slide must cover a UNIQUE aspect with SPECIFIC details.\n\n"
            + "\n\n".join(blocks)
            + f"\n\nGenerate {content_slide_count} slides with completely different content for each slide."
        )


CONTENT_LIBRARIES: List[ContentLibrary] = [AprioriLibrary()]
DEFAULT_LIBRARY = ContentLibrary()


def find_library(topic: str) -> ContentLibrary:
    for library in CONTENT_LIBRARIES:
        if library.matches(topic):
            return library
    return DEFAULT_LIBRARY


def generate_content_slides(
    topic: str,
    count: int,
    more_info_mode: bool = False,
    offset: int = 0,
    short_titles: Optional[bool] = None,
) -> List[Slide]:
    """Builds exactly ``count`` content slides, starting at deck position ``offset``."""
    if count <= 0:
        return []
    if short_titles is None:
        short_titles = use_short_titles(offset + count)
    library = find_library(topic)
    return [
        library.content_slide(topic, position, more_info_mode, short_titles)
        for position in range(offset, offset + count)
    ]


def generate_fallback_presentation(topic: str, slide_count: int, more_info_mode: bool = False) -> List[Slide]:
    """Builds a complete deck (title slide first) without calling the generative service."""
    content_slide_count = max(slide_count - 1, 0)
    library = find_library(topic)
    logging.info(
        f"Generating {content_slide_count} fallback slides for '{topic}' from the '{library.name}' library"
    )
    slides = [make_title_slide(topic)]
    slides.extend(
        generate_content_slides(
            topic,
            content_slide_count,
            more_info_mode,
            short_titles=use_short_titles(content_slide_count),
        )
    )
    return slides
