"""Static deployment instructions shown by the deploy helper page."""

DEPLOY_GUIDES = {
    "vercel": """
To deploy to Vercel:
1) Install CLI: npm i -g vercel
2) Run from project root: vercel && vercel --prod
3) Set environment vars (OPENAI_API_KEY, DATABASE_URL, etc.).
""",
    "render": """
To deploy to Render:
1) Push this repo to GitHub.
2) Create a new Web Service in Render and connect the repo.
3) Build command: pip install .
4) Start command: uvicorn vipudev.main:app --host 0.0.0.0 --port $PORT --app-dir backend
5) Configure environment variables.
""",
    "railway": """
To deploy to Railway:
1) Install Railway CLI: npm i -g @railway/cli
2) railway login
3) railway init
4) railway up
5) Add your environment variables in Railway dashboard.
""",
}

UNKNOWN_PLATFORM_MESSAGE = "Unknown platform. Use vercel | render | railway."


def deployment_instructions(platform: str) -> str:
    return DEPLOY_GUIDES.get(platform.strip().lower(), UNKNOWN_PLATFORM_MESSAGE)
