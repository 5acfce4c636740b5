from force_tracker.analysis.extractors import (
    extract_concepts,
    extract_definitions,
    extract_examples,
    extract_facts,
    extract_headings,
    extract_key_points,
    extract_processes,
    extract_sections,
    extract_statistics,
    extract_title,
    extract_vocabulary,
    frequent_capitalized_terms,
)

NATO = [
    "Alpha", "Bravo", "Charlie", "Delta", "Echo", "Foxtrot", "Golf",
    "Hotel", "India", "Juliet", "Kilo", "Lima", "Mike", "November",
]  # fmt: skip


class TestTitleHeadingsSections:
    def test_title_prefers_first_heading(self) -> None:
        assert extract_title("anything", ["Intro", "Later"]) == "Intro"

    def test_title_falls_back_to_first_short_line(self) -> None:
        assert extract_title("\nabc\nA decent title line\n", []) == "A decent title line"

    def test_title_defaults_to_course_content(self) -> None:
        assert extract_title("", []) == "Course Content"

    def test_headings_and_sections(self) -> None:
        text = "Overview\nthis line is body text\nKEY TERMS\nmore body text here"

        headings = extract_headings(text)

        assert headings == ["Overview", "KEY TERMS"]
        assert extract_sections(text, headings) == [
            "this line is body text",
            "more body text here",
        ]


class TestKeyPoints:
    def test_prefers_signal_sentences_then_pads(self) -> None:
        text = (
            "Photosynthesis is the process plants use to make food. "
            "Light energy is essential for it. Short one. "
            "Plants release oxygen during the day as a byproduct of this work."
        )

        assert extract_key_points(text) == [
            "Photosynthesis is the process plants use to make food",
            "Light energy is essential for it",
            "Plants release oxygen during the day as a byproduct of this work",
        ]

    def test_caps_at_ten(self) -> None:
        text = " ".join(f"Item {i} is an important idea." for i in range(12))

        result = extract_key_points(text)

        assert result == [f"Item {i} is an important idea" for i in range(10)]

    def test_duplicates_removed(self) -> None:
        text = "Learning is a lifelong journey. Learning is a lifelong journey."

        assert extract_key_points(text) == ["Learning is a lifelong journey"]


class TestConcepts:
    def test_concept_of_pattern(self) -> None:
        assert extract_concepts("We studied the theory of Relativity in class.") == [
            "Relativity"
        ]

    def test_named_method_pattern(self) -> None:
        assert extract_concepts("Engineers apply the Newton method daily.") == ["Newton"]

    def test_stopword_led_phrase_filtered(self) -> None:
        assert extract_concepts("The Theory is simple.") == []

    def test_too_short_filtered(self) -> None:
        assert extract_concepts("Ab is tiny.") == []

    def test_frequent_terms_sorted_by_count(self) -> None:
        text = "Alice met Bob. Bob met Carol. Alice and Bob left."

        assert frequent_capitalized_terms(text) == ["Bob", "Alice"]

    def test_caps_at_twelve(self) -> None:
        text = " ".join(f"{word} is a signal word." for word in NATO)

        assert extract_concepts(text) == NATO[:12]


class TestDefinitions:
    def test_is_pattern(self) -> None:
        assert extract_definitions(
            "Osmosis is the movement of water across a membrane."
        ) == ["Osmosis: the movement of water across a membrane"]

    def test_refers_to_and_defined_as(self) -> None:
        text = (
            "Entropy refers to the measure of disorder in a system. "
            "Velocity can be defined as speed in a given direction."
        )

        assert extract_definitions(text) == [
            "Entropy: the measure of disorder in a system",
            "Velocity: speed in a given direction",
        ]

    def test_orders_matches_by_position_across_patterns(self) -> None:
        text = (
            "Diffusion involves particles spreading out evenly. "
            "Osmosis is the movement of water across a membrane."
        )

        assert extract_definitions(text) == [
            "Diffusion: particles spreading out evenly",
            "Osmosis: the movement of water across a membrane",
        ]

    def test_short_body_rejected(self) -> None:
        assert extract_definitions("Zen is calm.") == []

    def test_short_term_rejected(self) -> None:
        assert extract_definitions("It is a fairly long explanation here.") == []

    def test_term_does_not_swallow_another_verb(self) -> None:
        text = "Photosynthesis involves light which is absorbed by chlorophyll pigments."

        assert extract_definitions(text) == [
            "Photosynthesis: light which is absorbed by chlorophyll pigments"
        ]

    def test_stopword_led_term_rejected(self) -> None:
        assert extract_definitions("This is a really important sentence about cells.") == []

    def test_caps_at_ten(self) -> None:
        text = " ".join(f"{name} is the name of a radio letter." for name in NATO[:12])

        assert extract_definitions(text) == [
            f"{name}: the name of a radio letter" for name in NATO[:10]
        ]


class TestFacts:
    def test_numeric_and_attribution_sentences(self) -> None:
        text = (
            "About 71 percent of Earth is covered by water. The sky looks blue. "
            "In 1969 humans landed on the Moon. Research shows sleep improves memory."
        )

        assert extract_facts(text) == [
            "About 71 percent of Earth is covered by water",
            "In 1969 humans landed on the Moon",
            "Research shows sleep improves memory",
        ]

    def test_short_sentence_rejected(self) -> None:
        assert extract_facts("It was 1999.") == []

    def test_caps_at_eight(self) -> None:
        text = " ".join(f"Sample {i} weighed {i} kilograms at the lab." for i in range(10))

        assert extract_facts(text) == [
            f"Sample {i} weighed {i} kilograms at the lab" for i in range(8)
        ]


class TestExamples:
    def test_example_clauses(self) -> None:
        text = (
            "Many fruits are sweet, such as mangoes and ripe bananas. "
            "Consider a rainy afternoon at home."
        )

        assert extract_examples(text) == [
            "such as mangoes and ripe bananas",
            "Consider a rainy afternoon at home",
        ]

    def test_eg_abbreviation(self) -> None:
        text = "Use short keys, e.g. single letters for loop counters."

        assert extract_examples(text) == ["e.g. single letters for loop counters"]

    def test_short_clause_rejected(self) -> None:
        assert extract_examples("I like it.") == []

    def test_caps_at_six(self) -> None:
        text = " ".join(f"Bring tools such as hammer number {i} today." for i in range(8))

        assert extract_examples(text) == [
            f"such as hammer number {i} today" for i in range(6)
        ]


class TestVocabulary:
    def test_parenthetical_terms_and_suffix_words(self) -> None:
        text = (
            "Search Engine Optimization (SEO) drives traffic. "
            "Good communication needs patience."
        )

        assert extract_vocabulary(text) == [
            "Search Engine Optimization",
            "Optimization",
            "communication",
        ]

    def test_upper_length_bound_is_exclusive(self) -> None:
        text = f"{'a' * 26}tion {'b' * 25}tion"

        assert extract_vocabulary(text) == [f"{'b' * 25}tion"]

    def test_caps_at_fifteen(self) -> None:
        words = [f"{chr(ord('a') + i) * 3}tion" for i in range(17)]

        assert extract_vocabulary(" ".join(words)) == words[:15]


class TestProcesses:
    def test_steps_and_sequence_words(self) -> None:
        text = (
            "First, gather all the required materials. "
            "Step 2 involves mixing the dry ingredients. The oven must be hot. "
            "Finally, bake the cake for thirty minutes."
        )

        assert extract_processes(text) == [
            "First, gather all the required materials",
            "Step 2 involves mixing the dry ingredients",
            "Finally, bake the cake for thirty minutes",
        ]

    def test_caps_at_eight(self) -> None:
        text = " ".join(f"Step {i} requires mixing the dry ingredients." for i in range(10))

        assert extract_processes(text) == [
            f"Step {i} requires mixing the dry ingredients" for i in range(8)
        ]


class TestStatistics:
    def test_percentages_averages_and_ratios(self) -> None:
        text = (
            "About 40% of students study at night. The mean score was 72 points. "
            "3 out of 4 dentists agree. Cats sleep a lot."
        )

        assert extract_statistics(text) == [
            "About 40% of students study at night",
            "The mean score was 72 points",
            "3 out of 4 dentists agree",
        ]

    def test_caps_at_six(self) -> None:
        text = " ".join(f"The average class size was {i} pupils." for i in range(8))

        assert extract_statistics(text) == [
            f"The average class size was {i} pupils" for i in range(6)
        ]
