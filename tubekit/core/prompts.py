from langchain_core.prompts import ChatPromptTemplate

summary_system_template = (
    "When summarizing YouTube videos: "
    "1) Begin with a brief introduction that captures the video's topic and purpose, "
    "using an emoji to set the tone. "
    "2) Present main points using bullet points with emojis. "
    "3) Provide a relatable analogy. "
    "4) List important keywords. "
    "5) End with a key takeaway. "
    "Keep the format clean and avoid using any special formatting characters like "
    "asterisks or underscores. Use clear section headers like 'Main Points:' and "
    "'Keywords:' without any special formatting."
)

seo_system_template = (
    "You are a YouTube SEO expert. Always respond with properly formatted JSON objects. "
    "Use \\n for newlines in descriptions."
)

# Literal braces are doubled for the prompt template.
seo_user_template = """As a YouTube SEO expert, analyze and enhance this video metadata for maximum visibility:

Title: "{title}"
Description: "{description}"
Tags: "{tags}"

Provide optimization suggestions following YouTube's current best practices. Focus on creating:

1. Engaging titles that drive clicks (45-70 characters)
2. A comprehensive, well-structured description that includes:
   - An engaging hook in the first 2-3 lines
   - Main value points and content overview
   - Relevant timestamps (if applicable)
   - Call-to-action (subscribe, like, etc.)
   - Social media links
   - 3-5 relevant hashtags

3. Strategic tags and keywords that boost discoverability

Format the description with proper sections and spacing. Use \\n for newlines. Example format:

🎥 [Engaging Hook / Main Value Proposition]\\n\\n
In this video, you'll discover:\\n
• [Key Point 1]\\n
• [Key Point 2]\\n
• [Key Point 3]\\n\\n
🕒 TIMESTAMPS:\\n
00:00 - Introduction\\n
02:30 - Main Topic 1\\n
05:45 - Main Topic 2\\n\\n
📱 CONNECT WITH ME:\\n
Instagram: @handle\\n
Twitter: @handle\\n
Website: example.com\\n\\n
#Hashtag1 #Hashtag2 #Hashtag3

Respond with a JSON object in this format:
{{
  "title": [
    "Primary SEO-optimized title",
    "Alternative engaging title",
    "Question-based title variation"
  ],
  "description": [
    "Full optimized description with all sections",
    "Alternative description with different emphasis",
    "Condensed version for sharing"
  ],
  "tags": [
    "primary-keyword",
    "secondary-keyword",
    "long-tail-keyword",
    "related-term",
    "niche-specific",
    "broader-topic"
  ],
  "keywords": [
    "trending-term-1",
    "trending-term-2",
    "trending-term-3",
    "trending-term-4"
  ]
}}"""

summary_prompt = ChatPromptTemplate.from_messages([
    ("system", summary_system_template),
    ("human", "{text}"),
])

seo_prompt = ChatPromptTemplate.from_messages([
    ("system", seo_system_template),
    ("human", seo_user_template),
])
