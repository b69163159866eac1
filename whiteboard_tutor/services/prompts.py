"""
Prompt templates for question generation, hinting and answer verification.
"""

import random
import time
from typing import Optional, Sequence

QUESTION_TOPICS = [
    'algebra and linear equations',
    'geometry and mensuration',
    'arithmetic and percentages',
    'quadratic equations',
    'triangles and angles',
    'number systems and fractions',
    'ratios and proportions',
    'simple and compound interest',
    'profit and loss',
    'time, speed and distance',
]


QUESTION_PROMPT = """You are a {subject_teacher} teacher creating a NEW and UNIQUE question for Class {class_level} students.

IMPORTANT: Generate a DIFFERENT question each time. Use random numbers and scenarios. (Request ID: {request_id})

Focus on: {topic}

Requirements:
- Generate ONE clear, well-formatted {subject_lower} problem appropriate for Class {class_level}
- Use DIFFERENT numbers than typical examples
- The problem should be solvable by hand in 3-5 steps
- Do NOT include the solution or answer
- Make it interesting and practical
- Vary the difficulty within Class {class_level} range

Examples of question styles (but create your own with different numbers):
- Linear equations: "Solve for x: [random]x + [random] = [random]"
- Geometry: "Find the area of a [shape] with [dimensions]"
- Word problems: "If [quantity] items cost ₹[amount], what is the cost of [different quantity] items?"
- Percentages: "[random]% of [number] is what number?"

Generate ONE NEW UNIQUE question NOW:"""


HINT_HEADER = """You are a mathematics teacher providing hints to help a student solve a problem.

QUESTION:
{question}"""


HINT_CONTEXTUAL_INSTRUCTIONS = """

STUDENT'S CURRENT WORK:
Analyze what the student has written/drawn on the whiteboard.

INSTRUCTIONS:
1. First, carefully examine what the student has written or drawn on the whiteboard
2. Assess their current progress - have they started correctly? Are they on the right track?
3. If they have made progress:
   - Acknowledge what they've done correctly
   - Guide them on the NEXT STEP they should take
   - Be specific about what to do next
4. If their approach is incorrect:
   - Gently point out what's wrong
   - Suggest the correct approach or concept they should use
   - Don't just say "wrong" - explain why
5. If they haven't started or made little progress:
   - Guide them on where to BEGIN
   - Suggest the first step or the approach they should take
   - Remind them of the key concept needed
6. Keep the hint concise (2-4 sentences maximum)
7. Use simple, encouraging, supportive language
8. Do NOT include the final answer or numerical result
9. Focus on helping them move forward from their current position

Example responses:
- Good progress: "Good! You've set up the equation correctly. Now try isolating the variable by moving all terms with x to one side."
- Wrong approach: "I see you're using the wrong formula here. This problem requires the quadratic formula, not simple factoring. Try using the formula: x = (-b ± √(b²-4ac))/2a"
- Just starting: "To begin, identify what you're trying to find and what information you're given. Then try setting up an equation that relates these values."
- Stuck midway: "You've correctly identified the main equation. Now apply the distributive property to simplify the left side."

Generate a contextual hint based on their current work:"""


HINT_GENERAL_INSTRUCTIONS = """

INSTRUCTIONS:
1. Provide a helpful hint that guides the student without giving away the complete answer
2. Focus on the approach, method, or key concept needed to solve this problem
3. Guide them on where to START
4. Keep the hint concise (2-3 sentences maximum)
5. Use simple, encouraging language
6. Do NOT include the final answer or numerical result
7. Focus on the method or approach they should take

Generate a helpful hint to get them started:"""


VERIFY_PROMPT = """You are a mathematics teacher reviewing a student's handwritten solution on a whiteboard.

IMPORTANT: You MUST analyze the actual drawing/writing in the image provided. Look carefully at what the student has written or drawn.

QUESTION:
{question}

INSTRUCTIONS:
1. First, describe what you see in the image - what numbers, equations, or working did the student write?
2. Analyze if the student's written answer matches the correct solution
3. Check their working and methodology
4. Determine if the answer is CORRECT or INCORRECT based on what they actually wrote

Your response MUST be in this exact JSON format:
{{
  "isCorrect": true,
  "feedback": "Start by describing what you see in the image, then provide detailed analysis of their solution",
  "correctAnswer": "The correct answer and solution steps"
}}

CRITICAL JSON FORMATTING RULES:
- Use VALID JSON only - ensure all strings are properly escaped
- Use plain text in strings - NO markdown (no **, `, __, etc.)
- For line breaks in strings, use \\n (double backslash n)
- Escape quotes inside strings with \\"
- Keep text simple and readable
- Write numbers and equations clearly
- Use "x" for multiplication, "/" for division
- Do NOT include special control characters

CRITICAL: Base your evaluation ONLY on what is actually drawn/written in the image. Do not assume or guess.
Be honest - if the answer is wrong, say so clearly. If you cannot read the handwriting, say that too."""


def _subject_teacher(subject: str) -> str:
    return 'mathematics' if subject.lower() in ('maths', 'math', 'mathematics') else subject.lower()


def build_question_prompt(
    subject: str,
    class_level: int,
    topic: Optional[str] = None,
    request_id: Optional[int] = None,
    topics: Sequence[str] = QUESTION_TOPICS
) -> str:
    """
    Build the question-generation prompt.

    A random topic and a millisecond request id keep consecutive questions
    from repeating.
    """
    if topic is None:
        topic = random.choice(list(topics))
    if request_id is None:
        request_id = int(time.time() * 1000)
    teacher = _subject_teacher(subject)
    return QUESTION_PROMPT.format(
        subject_teacher=teacher,
        subject_lower=teacher,
        class_level=class_level,
        request_id=request_id,
        topic=topic,
    )


def build_hint_prompt(question: str, with_work: bool) -> str:
    """Hint prompt; with_work selects the variant that reads the board image."""
    instructions = HINT_CONTEXTUAL_INSTRUCTIONS if with_work else HINT_GENERAL_INSTRUCTIONS
    return HINT_HEADER.format(question=question) + instructions


def build_verify_prompt(question: str) -> str:
    return VERIFY_PROMPT.format(question=question)


__all__ = [
    'QUESTION_TOPICS',
    'build_question_prompt',
    'build_hint_prompt',
    'build_verify_prompt',
]
