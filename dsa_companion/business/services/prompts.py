"""
Prompt templates sent to the model provider.

Every template ends with the JSON shape the reply must follow; the gateway
parses the reply against the matching schema in ``data.schemas.ai``.
"""
import json
from textwrap import dedent
from typing import List, Optional

from dsa_companion.data.schemas import ProblemResponse, TestCase

DEFAULT_CATEGORY = "General"
DEFAULT_LANGUAGE = "javascript"
DEFAULT_QUIZ_TOPIC = "Data Structures and Algorithms"
QUIZ_QUESTION_COUNT = 5

# Higher for creative output, lower where answers should stay consistent
TEMPERATURE_GENERATE_PROBLEM = 0.7
TEMPERATURE_QUIZ = 0.7
TEMPERATURE_HINT = 0.5
TEMPERATURE_SUPPLEMENTARY = 0.5
TEMPERATURE_VALIDATE = 0.3
TEMPERATURE_EXPLANATION = 0.3


def generate_problem_prompt(topic: str, difficulty: str, category: Optional[str]) -> str:
    return dedent(f"""\
        Generate a {difficulty} difficulty Data Structures and Algorithms problem about {topic}.
        The response should be in JSON format with the following structure:
        {{
          "title": "Problem Title",
          "description": "Detailed problem description with examples",
          "difficulty": "{difficulty}",
          "category": "{category or DEFAULT_CATEGORY}",
          "testCases": [
            {{
              "input": "input description",
              "output": "expected output",
              "explanation": "brief explanation"
            }}
          ],
          "solutionTemplate": "function solution(input) {{ // TODO: implement solution }}",
          "hints": ["hint 1", "hint 2"],
          "timeComplexity": "O(n)",
          "spaceComplexity": "O(1)"
        }}
        Respond with the JSON object only.""")


def _format_test_cases(test_cases: List[TestCase]) -> str:
    return json.dumps([tc.model_dump(by_alias=True) for tc in test_cases], indent=2)


def validate_solution_prompt(problem: ProblemResponse, code: str, language: str) -> str:
    return dedent("""\
        Validate this {language} solution for the following problem:

        Problem: {description}

        Solution Code:
        {code}

        Test Cases:
        {test_cases}

        Please analyze the solution and provide a JSON response with:
        {{
          "isCorrect": true/false,
          "passedTests": number,
          "totalTests": number,
          "errors": ["error1", "error2"],
          "suggestions": ["suggestion1", "suggestion2"],
          "timeComplexity": "O(n)",
          "spaceComplexity": "O(1)",
          "canBeOptimized": true/false,
          "optimizationHints": ["hint1", "hint2"]
        }}
        Respond with the JSON object only.""").format(
        language=language,
        description=problem.description,
        code=code,
        test_cases=_format_test_cases(problem.test_cases),
    )


def hint_prompt(problem: ProblemResponse, attempt: int) -> str:
    return dedent("""\
        Provide a helpful hint for this problem. This is attempt number {attempt}, so adjust the hint accordingly:

        Problem: {description}
        Difficulty: {difficulty}
        Category: {category}

        Provide a JSON response with:
        {{
          "hint": "specific hint text",
          "hintLevel": "subtle|moderate|detailed",
          "nextStep": "what the user should try next"
        }}
        Respond with the JSON object only.""").format(
        attempt=attempt,
        description=problem.description,
        difficulty=problem.difficulty.value,
        category=problem.category,
    )


def explanation_prompt(problem: ProblemResponse, code: Optional[str]) -> str:
    solution = f"Solution: {code}\n" if code else ""
    return dedent("""\
        Provide a detailed explanation for this problem:

        Problem: {description}
        {solution}
        Provide a JSON response with:
        {{
          "explanation": "detailed step-by-step explanation",
          "keyConcepts": ["concept1", "concept2"],
          "algorithm": "algorithm description",
          "timeComplexity": "O(n) explanation",
          "spaceComplexity": "O(1) explanation",
          "examples": ["example1", "example2"]
        }}
        Respond with the JSON object only.""").format(
        description=problem.description,
        solution=solution,
    )


def quiz_prompt(topic: Optional[str]) -> str:
    return dedent(f"""\
        Generate a quiz about {topic or DEFAULT_QUIZ_TOPIC} with {QUIZ_QUESTION_COUNT} multiple choice questions.
        The response should be in JSON format:
        {{
          "questions": [
            {{
              "question": "Question text",
              "options": ["A", "B", "C", "D"],
              "correctAnswer": 0,
              "explanation": "Why this is correct"
            }}
          ]
        }}
        Respond with the JSON object only.""")


def supplementary_prompt(topic: str, difficulty: str) -> str:
    return dedent(f"""\
        Provide supplementary learning materials for {topic} at {difficulty} level.
        The response should be in JSON format:
        {{
          "resources": [
            {{
              "type": "article|video|book|practice",
              "title": "Resource title",
              "description": "Brief description",
              "url": "resource URL if applicable",
              "difficulty": "beginner|intermediate|advanced"
            }}
          ],
          "keyTakeaways": ["takeaway1", "takeaway2"],
          "nextTopics": ["topic1", "topic2"]
        }}
        Respond with the JSON object only.""")
