from claude_token_optimizer.cli import app

app(prog_name="claude-token-optimizer")
