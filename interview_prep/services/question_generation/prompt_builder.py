"""
Question Generation Prompt Builder

Composes the single prompt sent to the generation provider from a validated
GenerationRequest: role and company, interview type framing, difficulty
framing and the output format rules the voice assistant depends on.

Author: @kcaparas1630
"""

from interview_prep.core.prompt_templates import PromptTemplate, sanitize_text
from interview_prep.schemas.question_schemas import Difficulty, GenerationRequest, InterviewType

INTERVIEW_FOCUS = {
    InterviewType.TECHNICAL: (
        "Focus exclusively on technical questions covering programming concepts, algorithms, "
        "system design, and technical problem-solving."
    ),
    InterviewType.BEHAVIORAL: (
        "Focus exclusively on behavioral questions covering past experiences, soft skills, "
        "teamwork, leadership, and workplace scenarios."
    ),
    InterviewType.MIXED: "Create a balanced mix of both technical and behavioral questions.",
}

DIFFICULTY_CONTEXT = {
    Difficulty.EASY: (
        "Questions should be entry-level, suitable for junior positions or candidates with "
        "0-2 years of experience."
    ),
    Difficulty.MEDIUM: (
        "Questions should be intermediate-level, suitable for mid-level positions or candidates "
        "with 2-5 years of experience."
    ),
    Difficulty.HARD: (
        "Questions should be advanced-level, suitable for senior positions or candidates with "
        "5+ years of experience."
    ),
}

QUESTION_GENERATION_TEMPLATE = PromptTemplate(
    template="""You are an expert technical recruiter creating interview questions for a {job_role} position{company_context}.

Interview Type: {interview_type}
Difficulty Level: {difficulty}
Number of Questions: {number_of_questions}

{interview_focus}
{difficulty_context}

IMPORTANT INSTRUCTIONS:
1. Generate exactly {number_of_questions} interview questions
2. Each question should be clear, professional, and relevant to the {job_role} position
3. For technical questions: Cover relevant technologies, concepts, and problem-solving skills
4. For behavioral questions: Use the STAR method framework (Situation, Task, Action, Result)
5. Avoid special characters like /, *, #, or formatting symbols (these will be read by a voice assistant)
6. Each question should be a complete, standalone question
7. Questions should be conversational and suitable for voice interaction

For each question, provide:
- question: The interview question text
- category: A brief category label (e.g., "JavaScript", "System Design", "Leadership", "Problem Solving")

Return ONLY a valid JSON array in this exact format, with no additional text or formatting:
[
  {{
    "question": "Can you describe your experience with...",
    "category": "Experience"
  }},
  {{
    "question": "How would you approach...",
    "category": "Problem Solving"
  }}
]""",
    placeholders={
        "job_role": "Target job role",
        "company_context": "' at <company>' or empty",
        "interview_type": "technical, behavioral or mixed",
        "difficulty": "easy, medium or hard",
        "number_of_questions": "Exact number of questions to generate",
        "interview_focus": "Framing text for the interview type",
        "difficulty_context": "Framing text for the difficulty",
    },
    sanitization_config={
        "job_role": {"max_length": 200, "escape_html": False},
        "company_context": {"allow_empty": True, "sanitize": False},
        "interview_focus": {"escape_html": False},
        "difficulty_context": {"escape_html": False},
    },
)


def build_question_prompt(request: GenerationRequest) -> str:
    company_context = ""
    if request.company and request.company.strip():
        company_context = f" at {sanitize_text(request.company, max_length=200, escape_html=False)}"

    return QUESTION_GENERATION_TEMPLATE.render(
        job_role=request.jobRole,
        company_context=company_context,
        interview_type=request.interviewType.value,
        difficulty=request.difficulty.value,
        number_of_questions=request.numberOfQuestions,
        interview_focus=INTERVIEW_FOCUS[request.interviewType],
        difficulty_context=DIFFICULTY_CONTEXT[request.difficulty],
    )
