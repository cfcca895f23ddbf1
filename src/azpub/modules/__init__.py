"""azpub modules - Self-contained bricks following the brick philosophy

- Interaction Handler: Prompt and display abstraction (click or mock)
- Prompt Session: Interactive publish parameter sequence
"""
