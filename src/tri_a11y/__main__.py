from tri_a11y.presentation.cli.app import app

app()
