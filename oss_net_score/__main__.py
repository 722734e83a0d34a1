from oss_net_score.cli import app

app()
