"""Tests for the ATS scoring rubric."""

import pytest

from resume_builder.models import Resume, Education, Experience, empty_resume
from resume_builder.ats.scorer import ATSScorer, calculate_ats_score, round_half_up


PLAIN_BULLETS = [
    "Wrote code",
    "Fixed bugs",
    "Reviewed pull requests",
    "Wrote docs",
    "Ran tests",
    "Answered tickets",
]


def experience_only(bullets, position="Engineer"):
    return Resume(experience=[Experience(company="Acme", position=position, bullets=list(bullets))])


@pytest.mark.unit
class TestEmptyResume:

    def test_scores_zero(self):
        report = calculate_ats_score(Resume())

        assert report.score == 0
        assert report.formatting_score == 100
        assert report.keyword_match == 75
        assert report.keywords_evaluated is False

    def test_missing_sections_in_order(self):
        report = calculate_ats_score(Resume())

        assert report.missing_sections == [
            "Full Name", "Email", "Phone", "Work Experience", "Education", "Skills"
        ]

    def test_five_suggestions_in_evaluation_order(self):
        report = calculate_ats_score(Resume())

        assert report.suggestions == [
            "Add a professional summary (50+ characters)",
            "Add work experience to improve your resume",
            "Add your educational background",
            "Add a skills section with relevant technical and soft skills",
            "Consider adding projects to showcase your work",
        ]

    def test_editor_blank_resume_matches(self):
        assert calculate_ats_score(empty_resume()).to_dict() == calculate_ats_score(Resume()).to_dict()

    def test_from_empty_dict(self):
        report = calculate_ats_score(Resume.from_dict({}))
        assert report.score == 0
        assert len(report.suggestions) == 5


@pytest.mark.unit
class TestFullResume:

    def test_full_marks_without_keywords(self, full_resume):
        report = calculate_ats_score(full_resume)

        assert report.score == 90
        assert report.missing_sections == []
        assert report.suggestions == []
        assert report.formatting_score == 100

    def test_keyword_match_half(self, full_resume):
        report = calculate_ats_score(full_resume, ["python", "react"])

        assert report.keyword_match == 50
        assert report.keywords_evaluated is True
        assert report.score == 90 + 5

    def test_keyword_match_is_case_insensitive(self, full_resume):
        report = calculate_ats_score(full_resume, ["PYTHON", "Kubernetes"])
        assert report.keyword_match == 100

    def test_score_capped_at_100(self, full_resume):
        report = calculate_ats_score(full_resume, ["python", "docker", "aws"])

        assert report.keyword_match == 100
        assert report.score == 100

    def test_empty_keyword_list_uses_placeholder(self, full_resume):
        report = calculate_ats_score(full_resume, [])

        assert report.keyword_match == 75
        assert report.keywords_evaluated is False
        assert report.score == 90

    def test_idempotent(self, full_resume):
        first = calculate_ats_score(full_resume, ["python", "react"])
        second = calculate_ats_score(full_resume, ["python", "react"])
        assert first == second

    def test_does_not_modify_resume(self, full_resume):
        before = full_resume.to_dict()
        calculate_ats_score(full_resume, ["python"])
        assert full_resume.to_dict() == before


@pytest.mark.unit
class TestPersonalInfo:

    def test_short_summary_suggests_summary(self, full_resume):
        full_resume.personal_info.summary = "Engineer."
        report = calculate_ats_score(full_resume)

        assert report.score == 88
        assert report.suggestions == ["Add a professional summary (50+ characters)"]

    def test_summary_of_exactly_50_chars_is_not_enough(self, full_resume):
        full_resume.personal_info.summary = "x" * 50
        assert calculate_ats_score(full_resume).score == 88

    def test_location_is_not_a_missing_section(self, full_resume):
        full_resume.personal_info.location = ""
        report = calculate_ats_score(full_resume)

        assert report.score == 87
        assert report.missing_sections == []


@pytest.mark.unit
class TestExperience:

    def test_two_bullets_earn_no_bullet_points(self):
        report = calculate_ats_score(experience_only(PLAIN_BULLETS[:2]))

        assert report.score == 10
        assert "Add more bullet points to your experience (aim for 3-5 per role)" in report.suggestions

    def test_three_bullets_cross_first_threshold(self):
        assert calculate_ats_score(experience_only(PLAIN_BULLETS[:3])).score == 15

    def test_six_bullets_cross_second_threshold(self):
        assert calculate_ats_score(experience_only(PLAIN_BULLETS[:6])).score == 20

    def test_blank_bullets_are_not_counted(self):
        report = calculate_ats_score(experience_only(["Wrote code", "   ", "Fixed bugs", ""]))
        assert report.score == 10

    def test_bullets_counted_across_entries(self):
        resume = Resume(experience=[
            Experience(position="Engineer", bullets=PLAIN_BULLETS[:2]),
            Experience(position="Engineer", bullets=PLAIN_BULLETS[2:3]),
        ])
        assert calculate_ats_score(resume).score == 15

    def test_action_verb_substring(self):
        # "led" inside "handled" counts
        report = calculate_ats_score(experience_only(["Handled escalations"]))

        assert report.score == 15
        assert "Use strong action verbs (Led, Developed, Managed, etc.)" not in report.suggestions

    @pytest.mark.parametrize("bullet", ["Grew revenue 25%", "Saved $300k", "Onboarded 50+ clients"])
    def test_metrics_patterns(self, bullet):
        report = calculate_ats_score(experience_only([bullet]))
        assert 'Add quantifiable achievements (e.g., "increased sales by 25%")' not in report.suggestions

    def test_plain_number_is_not_a_metric(self):
        report = calculate_ats_score(experience_only(["Wrote 3 services"]))
        assert 'Add quantifiable achievements (e.g., "increased sales by 25%")' in report.suggestions

    def test_suggestion_order_within_experience(self):
        report = calculate_ats_score(experience_only(["Wrote code"]))

        assert report.suggestions[1:4] == [
            "Add more bullet points to your experience (aim for 3-5 per role)",
            "Use strong action verbs (Led, Developed, Managed, etc.)",
            'Add quantifiable achievements (e.g., "increased sales by 25%")',
        ]

    def test_adding_bullets_never_lowers_score(self):
        previous = -1
        for count in range(len(PLAIN_BULLETS) + 1):
            score = calculate_ats_score(experience_only(PLAIN_BULLETS[:count])).score
            assert score >= previous
            previous = score


@pytest.mark.unit
class TestOtherSections:

    def test_education_without_field(self, full_resume):
        full_resume.education[0].field_of_study = ""
        assert calculate_ats_score(full_resume).score == 85

    def test_only_first_education_entry_checked(self, full_resume):
        full_resume.education.insert(0, Education(institution="Bootcamp"))
        assert calculate_ats_score(full_resume).score == 85

    @pytest.mark.parametrize("count,expected", [(10, 90), (9, 87), (5, 87), (4, 83)])
    def test_skill_count_thresholds(self, full_resume, count, expected):
        items = [f"skill{i}" for i in range(count)]
        full_resume.skills = full_resume.skills[:1]
        full_resume.skills[0].items = items
        assert calculate_ats_score(full_resume).score == expected

    def test_projects_are_optional(self, full_resume):
        full_resume.projects = []
        report = calculate_ats_score(full_resume)

        assert report.score == 80
        assert report.missing_sections == []
        assert report.suggestions == ["Consider adding projects to showcase your work"]

    def test_project_without_technologies(self, full_resume):
        full_resume.projects[0].technologies = []
        assert calculate_ats_score(full_resume).score == 85


@pytest.mark.unit
class TestFormatting:

    def test_missing_position_title(self, full_resume):
        full_resume.experience[1].position = ""
        report = calculate_ats_score(full_resume)

        assert report.formatting_score == 80
        assert "Ensure all positions have job titles" in report.suggestions
        assert report.score == 90

    def test_penalty_applied_once(self, full_resume):
        for exp in full_resume.experience:
            exp.position = ""
        assert calculate_ats_score(full_resume).formatting_score == 80

    def test_formatting_suggestion_is_truncated_last(self):
        resume = experience_only(["Wrote code"], position="")
        report = calculate_ats_score(resume)

        assert report.formatting_score == 80
        assert len(report.suggestions) == 5
        assert "Ensure all positions have job titles" not in report.suggestions


@pytest.mark.unit
class TestKeywordRounding:

    def test_half_rounds_up(self, full_resume):
        keywords = ["python"] + [f"zzqx{i}" for i in range(7)]
        report = calculate_ats_score(full_resume, keywords)

        # 12.5% rounds to 13, bonus 1.3 rounds to 1
        assert report.keyword_match == 13
        assert report.score == 91

    def test_bonus_half_rounds_up(self):
        report = calculate_ats_score(empty_resume(), ["untitled", "zzqx1", "zzqx2", "zzqx3"])

        assert report.keyword_match == 25
        assert report.score == 3

    def test_round_half_up(self):
        assert round_half_up(12.5) == 13
        assert round_half_up(2.5) == 3
        assert round_half_up(2.4) == 2
        assert round_half_up(0) == 0


@pytest.mark.unit
class TestReport:

    def test_to_dict_keys(self, full_resume):
        data = ATSScorer().score_resume(full_resume).to_dict()

        assert set(data) == {
            "score", "keywordMatch", "missingSections", "suggestions",
            "formattingScore", "keywordsEvaluated",
        }


ID_LESS_BODY = {
    "personalInfo": {"fullName": "Ann Lee"},
    "experience": [{"company": "Acme", "position": "Dev", "bullets": ["Wrote code"]}],
    "skills": [{"category": "Tools", "items": ["Git"]}],
}


@pytest.mark.unit
class TestKeywordMatchInput:

    def test_same_body_scores_the_same(self):
        keywords = ["e2e", "d3", "5"]
        results = {
            calculate_ats_score(Resume.from_dict(ID_LESS_BODY), keywords).keyword_match
            for _ in range(50)
        }

        assert results == {0}

    def test_missing_title_is_not_matched(self):
        report = calculate_ats_score(Resume.from_dict(ID_LESS_BODY), ["resume", "untitled"])
        assert report.keyword_match == 0

    def test_supplied_ids_are_matched(self):
        body = dict(ID_LESS_BODY, experience=[dict(ID_LESS_BODY["experience"][0], id="e2e1")])
        assert calculate_ats_score(Resume.from_dict(body), ["e2e"]).keyword_match == 100
