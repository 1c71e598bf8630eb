"""Basic usage example for the Prodia client."""

from pathlib import Path

from prodia_client import ProdiaClient, UserError

# Create a client (reads PRODIA_TOKEN from the environment)
client = ProdiaClient()

# Generate an image from a prompt
result = client.job(
    {
        "type": "inference.flux.schnell.txt2img.v1",
        "config": {"prompt": "puppy playing in the snow", "seed": 42},
    },
    {"accept": "image/jpeg"},
)

print(f"Job state: {result.job.get('state')}")
Path("puppy.jpg").write_bytes(result.read())
print("✓ Saved puppy.jpg")

# Jobs the service rejects raise UserError with the service's message
try:
    client.job({"type": "inference.flux.schnell.txt2img.v1", "config": {}})
except UserError as e:
    print(f"✗ Job rejected: {e.message}")

client.close()
