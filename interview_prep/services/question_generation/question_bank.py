"""
Curated Question Bank

Pre-written interview questions served when the generation provider is out of
quota or returns output that cannot be used. Questions are grouped by interview
type and difficulty. "mixed" is not a key here; it is composed from the
technical and behavioral partitions at selection time.

The bank is built once at import time from tuples of frozen QuestionTemplate
records wrapped in read-only mappings, so it cannot be changed at runtime.
"""

from types import MappingProxyType
from typing import Mapping, Sequence, Tuple
from interview_prep.schemas.question_schemas import Difficulty, InterviewType, QuestionTemplate

QuestionPool = Tuple[QuestionTemplate, ...]
QuestionBank = Mapping[InterviewType, Mapping[Difficulty, QuestionPool]]


def _pool(*entries: Tuple[str, str]) -> QuestionPool:
    return tuple(QuestionTemplate(question=question, category=category) for question, category in entries)


_TECHNICAL = {
    Difficulty.EASY: _pool(
        ("What is the difference between let, const, and var in JavaScript?", "JavaScript Basics"),
        ("Can you explain what HTML semantic elements are and give some examples?", "HTML and CSS"),
        ("What is a REST API and how does it work?", "Web Development"),
        ("Explain the difference between double equals and triple equals in JavaScript", "JavaScript Basics"),
        ("What is the box model in CSS?", "HTML and CSS"),
        ("What is version control and why is it important?", "Development Tools"),
        ("Can you explain what a function is in programming?", "Programming Fundamentals"),
        ("What is the difference between frontend and backend development?", "Web Development"),
        ("What are arrays and how do you use them?", "Programming Fundamentals"),
        ("Explain what JSON is and why it's used", "Web Development"),
    ),
    Difficulty.MEDIUM: _pool(
        ("How do closures work in JavaScript and when would you use them?", "JavaScript"),
        ("Explain the concept of event delegation in JavaScript", "JavaScript"),
        ("What is the difference between synchronous and asynchronous programming?", "Programming Concepts"),
        ("Can you explain how promises work in JavaScript?", "JavaScript"),
        ("What is the virtual DOM and how does React use it?", "React"),
        ("Explain the difference between SQL and NoSQL databases", "Databases"),
        ("What are design patterns and can you name a few?", "Software Design"),
        ("How does authentication differ from authorization?", "Security"),
        ("Explain the concept of middleware in web applications", "Backend Development"),
        ("What is responsive design and how do you implement it?", "Frontend Development"),
    ),
    Difficulty.HARD: _pool(
        ("Design a system for handling millions of concurrent users. What considerations would you make?", "System Design"),
        ("Explain how you would optimize a slow database query in a production system", "Performance Optimization"),
        ("Describe the CAP theorem and its implications for distributed systems", "Distributed Systems"),
        ("How would you implement a rate limiting system for an API?", "System Design"),
        ("Explain the trade-offs between microservices and monolithic architectures", "Architecture"),
        ("How would you design a caching strategy for a high-traffic application?", "Performance Optimization"),
        ("Describe your approach to debugging a memory leak in a production application", "Debugging"),
        ("How would you implement eventual consistency in a distributed system?", "Distributed Systems"),
        ("Explain the security considerations when building a payment processing system", "Security"),
        ("Design a scalable notification system that can handle multiple channels", "System Design"),
    ),
}

_BEHAVIORAL = {
    Difficulty.EASY: _pool(
        ("Tell me about yourself and your background in software development", "Introduction"),
        ("Why are you interested in this position?", "Motivation"),
        ("What are your strengths as a developer?", "Self-Assessment"),
        ("Describe a typical day in your current or most recent role", "Work Style"),
        ("What technologies are you most excited to learn?", "Growth Mindset"),
        ("How do you stay updated with new technologies and trends?", "Continuous Learning"),
        ("What type of work environment do you thrive in?", "Work Style"),
        ("Tell me about a project you're proud of", "Achievements"),
        ("What motivates you in your work?", "Motivation"),
        ("Where do you see yourself in five years?", "Career Goals"),
    ),
    Difficulty.MEDIUM: _pool(
        ("Describe a time when you had to learn a new technology quickly. How did you approach it?", "Learning and Adaptability"),
        ("Tell me about a challenging bug you encountered and how you solved it", "Problem Solving"),
        ("Describe a situation where you disagreed with a team member. How did you handle it?", "Teamwork and Conflict"),
        ("Tell me about a time when you had to meet a tight deadline. What did you do?", "Time Management"),
        ("Describe a project that didn't go as planned. What did you learn from it?", "Learning from Failure"),
        ("Tell me about a time when you had to explain a technical concept to a non-technical person", "Communication"),
        ("Describe a situation where you took initiative to improve a process or system", "Initiative"),
        ("Tell me about a time when you received critical feedback. How did you respond?", "Growth Mindset"),
        ("Describe your experience working in an Agile environment", "Teamwork"),
        ("Tell me about a time when you had to balance multiple competing priorities", "Time Management"),
    ),
    Difficulty.HARD: _pool(
        ("Describe a time when you had to make a difficult architectural decision with limited information", "Decision Making"),
        ("Tell me about a situation where you had to lead a team through a major technical challenge", "Leadership"),
        ("Describe a time when you identified a critical security vulnerability. How did you handle it?", "Critical Thinking"),
        ("Tell me about a project where you had to balance technical debt with new feature development", "Strategic Thinking"),
        ("Describe a situation where you had to advocate for a significant technical change to stakeholders", "Influence and Communication"),
        ("Tell me about a time when you mentored a junior developer through a complex problem", "Leadership and Mentoring"),
        ("Describe how you handled a situation where a project was failing and needed to be turned around", "Crisis Management"),
        ("Tell me about a time when you had to refactor a large legacy codebase. What was your approach?", "Technical Leadership"),
        ("Describe a situation where you had to make trade-offs between performance, security, and time to market", "Strategic Thinking"),
        ("Tell me about your experience driving technical standards and best practices across a team or organization", "Leadership"),
    ),
}

QUESTION_BANK: QuestionBank = MappingProxyType({
    InterviewType.TECHNICAL: MappingProxyType(_TECHNICAL),
    InterviewType.BEHAVIORAL: MappingProxyType(_BEHAVIORAL),
})


def get_pool(interview_type: InterviewType, difficulty: Difficulty, bank: QuestionBank = QUESTION_BANK) -> Sequence[QuestionTemplate]:
    """Return the partition for a concrete (non-mixed) interview type."""
    return bank[interview_type][difficulty]
