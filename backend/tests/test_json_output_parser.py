import pytest
from langchain_core.exceptions import OutputParserException

from schemas.requirements import ComplianceCheckOutput, ValidateRequirementsOutput
from schemas import testcases as tc_schema
from services.llm.json_output_parser import StrictJSONOutputParser, parse_flow_output


class TestStrictJSONOutputParser:
    def test_plain_json(self):
        assert StrictJSONOutputParser().parse('{"a": 1}') == {"a": 1}

    def test_fenced_json(self):
        text = 'Here you go:\n```json\n{"a": [1, 2]}\n```\nThanks'
        assert StrictJSONOutputParser().parse(text) == {"a": [1, 2]}

    def test_json_surrounded_by_chatter(self):
        assert StrictJSONOutputParser().parse('Result: [{"x": 1}] done') == [{"x": 1}]

    @pytest.mark.parametrize("text", ["", "   ", "no json at all", "{broken"])
    def test_no_json_raises(self, text):
        with pytest.raises(OutputParserException):
            StrictJSONOutputParser().parse(text)


class TestParseFlowOutput:
    def test_validation_contract(self):
        raw = (
            '{"completenessValidation": {"isValid": false, '
            '"missingElements": [{"element": "Security", "reason": "No auth requirements"}]}}'
        )
        result = parse_flow_output(raw, ValidateRequirementsOutput)

        assert result.completeness_validation.is_valid is False
        assert result.completeness_validation.missing_elements[0].element == "Security"

    def test_bare_list_is_wrapped_under_list_key(self):
        raw = '```json\n[{"testCaseId": "TC-001", "title": "Login works", "priority": "High", "steps": ["a"]}]\n```'
        result = parse_flow_output(raw, tc_schema.GenerateTestCasesOutput, list_key="testCases")

        [case] = result.test_cases
        assert case.test_case_id == "TC-001"
        # collaborator-defined fields are kept
        assert case.model_dump(by_alias=True)["steps"] == ["a"]

    def test_wrong_shape_raises(self):
        with pytest.raises(OutputParserException):
            parse_flow_output('{"report": "missing fields"}', ComplianceCheckOutput)
