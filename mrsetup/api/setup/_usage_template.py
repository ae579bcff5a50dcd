"""Quick-start guide printed after a successful setup."""

USAGE_TEMPLATE = """
╔═══════════════════════════════════════════════════════════════════════╗
║                      Installation Complete!                           ║
╚═══════════════════════════════════════════════════════════════════════╝

Docker Model Runner with GPU support is now running on your system!

IMPORTANT: Run this command now or restart your terminal:
    source ~/.zshrc  # or ~/.bashrc if you use bash

Quick Start Guide:

1. Pull a model:
   docker model pull {{ model }}

2. List models:
   docker model ls

3. Run inference (single prompt):
   docker model run {{ model }} "Hello, how are you?"

4. Run inference (interactive):
   docker model run {{ model }}

5. Use in containers:
   docker run -e OPENAI_API_BASE=http://{{ container_host }}:{{ port }}/v1 your-app

6. Use OpenAI-compatible API:
   curl {{ host_url }}/v1/chat/completions \\
     -H "Content-Type: application/json" \\
     -d '{
       "model": "{{ model }}",
       "messages": [{"role": "user", "content": "Hello!"}]
     }'

Monitoring & Troubleshooting:

View logs:
  tail -f {{ log_path }}
  mrsetup logs tail

Check service status:
  launchctl list | grep {{ label }}
  mrsetup service status

Monitor GPU usage:
  sudo powermetrics --samplers gpu_power -i 1000

Restart service:
  launchctl unload {{ plist_path }}
  launchctl load {{ plist_path }}

Stop service:
  launchctl unload {{ plist_path }}

API endpoint:
  {{ host_url }}

What's Running:

  - model-runner service on macOS host (with Metal GPU)
  - llama.cpp with Metal acceleration
  - Colima (Docker daemon)
  - docker model CLI on macOS

Documentation:
  - Model Runner: https://docs.docker.com/ai/model-runner/
{% if repo_url %}
  - Source: {{ repo_url }}
{% endif %}

Happy inferencing!
"""
