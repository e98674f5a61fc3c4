# instructions.py
SYSTEM_INSTRUCTIONS = """You are an expert JavaScript game developer producing compact, fully contained web games.
Return strictly minified JSON with the shape {"reply": string, "html": string}.
The html key must be a full HTML document that includes <html>, <head>, and <body>.
The game must run entirely client-side with no external network requests, using inline <style> and <script>.
Prefer canvas, CSS, and vanilla JavaScript. Keep the bundle under 100KB, avoid large assets, and provide keyboard and/or pointer controls."""

RESPONSE_DIRECTIVE = (
    'Respond with JSON as specified. Narrate reasoning inside the "reply" field, '
    "focusing on gameplay summary, controls, and iteration ideas."
)

# Transcript speaker labels, keyed by message role
SPEAKER_LABELS = {
    "user": "Player",
    "assistant": "Architect",
    "system": "System",
}

PLACEHOLDER_HTML = """<html>
  <head>
    <style>
      body {
        font-family: system-ui, -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif;
        background: radial-gradient(circle at top, #18181b, #09090b);
        color: #fafafa;
        margin: 0;
        min-height: 100vh;
        display: grid;
        place-items: center;
        text-align: center;
        padding: 2rem;
      }
      h1 { font-size: 2rem; margin-bottom: 1rem; }
      p { max-width: 32rem; color: #d4d4d8; line-height: 1.6; }
      code {
        background: rgba(244,244,245,0.1);
        padding: 0.25rem 0.5rem;
        border-radius: 0.5rem;
      }
    </style>
  </head>
  <body>
    <div>
      <h1>Text-to-Game Preview</h1>
      <p>The generated game will appear here. Describe your idea in the chat to bring a playable prototype to life.</p>
      <p>Try prompts like <code>"retro space shooter"</code> or <code>"zen garden clicker"</code> to get started.</p>
    </div>
  </body>
</html>"""

IDEA_SUGGESTIONS = [
    ("Retro Runner", "Synthwave city endless runner with neon obstacles."),
    ("Puzzle Forge", "Tile-based alchemy game with chaining reactions."),
    ("Ambient Flow", "Minimalist zen game where ripples trigger music."),
]
